from six_cities.config.settings import Config

__all__ = ["Config"]
