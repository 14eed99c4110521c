from .loader import ConfigBundle, ProviderConfig, QueryConfig, load_config_bundle

__all__ = ["ConfigBundle", "ProviderConfig", "QueryConfig", "load_config_bundle"]
