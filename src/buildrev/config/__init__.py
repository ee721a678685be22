from buildrev.config.settings import Settings

__all__ = ["Settings"]
