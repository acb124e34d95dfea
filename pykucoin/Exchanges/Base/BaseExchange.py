class BaseExchange:
    """
        Base class for the REST wrappers in this package.

        A wrapper turns one method call into one HTTP request: it shapes the
        call's parameters, signs the request when the endpoint is private and
        hands back whatever the transport returned. The methods below are the
        ones every wrapper is expected to provide.
    """

    def _request(self, *args, **kwargs):
        """ (NOT IMPLEMENTED)
        Builds, optionally signs and sends one request to this exchange """
        raise NotImplementedError

    def _signRequest(self, *args, **kwargs):
        """ (NOT IMPLEMENTED)
        Returns the authentication headers for a request """
        raise NotImplementedError

    def getUserInfo(self, *args, **kwargs):
        """ (NOT IMPLEMENTED)
        Gets data for the account connected to the API & SECRET keys """
        raise NotImplementedError

    def getBalance(self, *args, **kwargs):
        """ (NOT IMPLEMENTED)
        Gets balances of the account, for one coin or for all of them """
        raise NotImplementedError

    def getTradingSymbols(self, *args, **kwargs):
        """ (NOT IMPLEMENTED)
        Gets all symbols which are tradable (currently) """
        raise NotImplementedError

    def getTicker(self, *args, **kwargs):
        """ (NOT IMPLEMENTED)
        Gets the latest tick for a pair """
        raise NotImplementedError

    def getOrderBooks(self, *args, **kwargs):
        """ (NOT IMPLEMENTED)
        Gets order book data for a pair """
        raise NotImplementedError

    def createOrder(self, *args, **kwargs):
        """ (NOT IMPLEMENTED)
        Places an order on the exchange """
        raise NotImplementedError

    def cancelOrder(self, *args, **kwargs):
        """ (NOT IMPLEMENTED)
        Cancels an order given its id """
        raise NotImplementedError

    def getActiveOrders(self, *args, **kwargs):
        """ (NOT IMPLEMENTED)
        Gets the open orders for a pair """
        raise NotImplementedError

    @classmethod
    def isValidResponse(cls, *args, **kwargs):
        """ (NOT IMPLEMENTED)
        Checks whether a payload received from the exchange is valid

        Returns
        --
            True if valid, False otherwise
        """
        raise NotImplementedError
