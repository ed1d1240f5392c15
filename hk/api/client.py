from hk._impl.api.client import HkAPIClient

__all__ = ["HkAPIClient"]
