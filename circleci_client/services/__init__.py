from circleci_client.services.circleci import AsyncCircleCIClient, CircleCIClient

__all__ = ["AsyncCircleCIClient", "CircleCIClient"]
