

class TabViewError(Exception):
    """Base exception for all tabview errors"""
    pass

class InvalidConfiguration(TabViewError, ValueError):
    """
    Page or sort configuration the engine refuses to accept
    (non-positive rows_on_page, non-positive active_page, etc)
    """
    pass

class ConfigError(TabViewError):
    """Invalid or inconsistent global.json / table config"""
    pass

class DataSourceError(TabViewError):
    """Records for a table could not be read from their configured source"""
    pass
