from gtincatalog.services.exceptions import APIError


class BrocadeError(APIError):
    """Raised for any Brocade catalog failure: network, HTTP status or undecodable body."""

    pass
