class DomainExplorerError(Exception):
    """Base exception for all domain_explorer errors"""
    pass

class ConfigError(DomainExplorerError):
    """Invalid or inconsistent global.json"""
    pass

class FetchError(DomainExplorerError):
    """
    The remote domain list could not be downloaded
    (network failure, proxy unavailable, non-2xx status, empty body)
    """
    pass

class ExpansionError(DomainExplorerError):
    """Semantic keyword expansion failed or is not configured"""
    pass

class UploadError(DomainExplorerError):
    """A manually uploaded domain list could not be decoded"""
    pass
