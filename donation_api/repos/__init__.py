from donation_api.repos.inmemory import InMemoryDonationRepo
from donation_api.repos.mongo import MongoDonationRepo

__all__ = ["InMemoryDonationRepo", "MongoDonationRepo"]
