class InvalidCredentialsException(Exception):
    """ Raised when a private endpoint is called without usable
    API & SECRET keys, or when the keys can't be read. """
    pass
