import os
import time
import hmac
import base64
import hashlib
import logging
from collections import namedtuple

import requests
from dotenv import load_dotenv, find_dotenv

from pykucoin.Exchanges.Base.BaseExchange import BaseExchange
from pykucoin.Exchanges.Base.Endpoint import Endpoint, formatPath, shapeParams
from pykucoin.Exchanges.Base.Exceptions import InvalidCredentialsException
from pykucoin.Utils.QueryString import encodeQueryString

logger = logging.getLogger(__name__)

Credentials = namedtuple('Credentials', ['api_key', 'secret_key'])

PAIR_AS_SYMBOL = {'symbol': 'pair'}


class Kucoin(BaseExchange):
    """ Wrapper around the KuCoin (v1) REST API """

    ORDER_TYPE_BUY = 'BUY'
    ORDER_TYPE_SELL = 'SELL'

    BASE_URL = 'https://api.kucoin.com/v1'
    DEFAULT_TIMEOUT = 1

    HEADER_API_KEY = 'KC-API-KEY'
    HEADER_NONCE = 'KC-API-NONCE'
    HEADER_SIGNATURE = 'KC-API-SIGNATURE'

    ENDPOINTS = {
        # Public
        "getExchangeRates": Endpoint('GET', '/open/currencies'),
        "getLanguages": Endpoint('GET', '/open/lang-list', send_params=False),
        "getTicker": Endpoint('GET', '/{pair}/open/tick', send_params=False),
        "getOrderBooks": Endpoint('GET', '/{pair}/open/orders',
            aliases=PAIR_AS_SYMBOL),
        "getOrderBooksByType": Endpoint('GET', '/{pair}/open/orders-{type}',
            aliases=PAIR_AS_SYMBOL),
        "getRecentlyDealtOrders": Endpoint('GET', '/{pair}/open/deal-orders'),
        "getTradingSymbols": Endpoint('GET', '/market/open/symbols',
            send_params=False),
        "getTrending": Endpoint('GET', '/market/open/coins-trending',
            send_params=False),
        "getCoins": Endpoint('GET', '/market/open/coins-list',
            send_params=False),
        # User
        "changeLanguage": Endpoint('POST', '/user/change-lang', signed=True),
        "getUserInfo": Endpoint('GET', '/user/info', signed=True,
            send_params=False),
        "getInviteCount": Endpoint('GET', '/referrer/descendant/count',
            signed=True, send_params=False),
        # Account
        "getPromotionRewardInfo": Endpoint('GET',
            '/account/{symbol}/promotion/info', signed=True,
            optional=['symbol']),
        "getPromotionRewardSummary": Endpoint('GET',
            '/account/{symbol}/promotion/sum', signed=True,
            send_params=False, optional=['symbol']),
        "getDepositAddress": Endpoint('GET',
            '/account/{symbol}/wallet/address', signed=True,
            send_params=False),
        "createWithdrawal": Endpoint('POST',
            '/account/{symbol}/withdraw/apply', signed=True,
            aliases={'coin': 'symbol'}),
        "cancelWithdrawal": Endpoint('POST',
            '/account/{symbol}/withdraw/cancel', signed=True),
        "getDepositAndWithdrawalRecords": Endpoint('GET',
            '/account/{symbol}/wallet/records', signed=True),
        "getBalance": Endpoint('GET', '/account/{symbol}/balance',
            signed=True, send_params=False, optional_truthy=['symbol']),
        # Trading
        "createOrder": Endpoint('POST', '/order', signed=True,
            aliases=PAIR_AS_SYMBOL),
        "getActiveOrders": Endpoint('GET', '/{pair}/order/active',
            signed=True, aliases=PAIR_AS_SYMBOL),
        "cancelOrder": Endpoint('POST', '/cancel-order', signed=True,
            aliases=PAIR_AS_SYMBOL),
        "getDealtOrders": Endpoint('GET', '/{pair}/deal-orders', signed=True,
            aliases=PAIR_AS_SYMBOL),
    }

    def __init__(self, api_key=None, secret_key=None, filename=None,
        get_credentials_from_env=False, base_url=None, timeout=None):

        self.credentials = None
        self.base_url = base_url if base_url is not None else Kucoin.BASE_URL
        self.timeout = timeout if timeout is not None else Kucoin.DEFAULT_TIMEOUT

        if get_credentials_from_env:
            load_dotenv(find_dotenv(usecwd=True))
            env_api_key = os.getenv('KUCOIN_API_KEY')
            env_secret_key = os.getenv('KUCOIN_API_SECRET')
            if env_api_key is not None and env_secret_key is not None:
                self.credentials = Credentials(env_api_key, env_secret_key)
            env_timeout = os.getenv('KUCOIN_TIMEOUT')
            if env_timeout is not None and timeout is None:
                self.timeout = float(env_timeout)
        elif filename is not None:
            self.credentials = Kucoin._readCredentialsFile(filename)

        # Credentials passed through init are used if nothing else gave any
        if self.credentials is None:
            if api_key is not None and secret_key is not None:
                self.credentials = Credentials(api_key, secret_key)

    @property
    def has_credentials(self):
        return self.credentials is not None

    @classmethod
    def _readCredentialsFile(cls, filename):
        """ Reads API & SECRET keys from the first two lines of `filename` """
        try:
            with open(filename, "r") as file:
                contents = file.read().splitlines()
        except OSError as e:
            raise InvalidCredentialsException(
                "Can't read {}, make sure the file is readable!".format(filename)) from e
        if len(contents) < 2:
            raise InvalidCredentialsException(
                "{} should hold the api key and the secret key on two lines".format(filename))
        return Credentials(contents[0].strip(), contents[1].strip())

    def getSignature(self, path, query_string, nonce):
        """ Computes the KC-API-SIGNATURE of a request.

            The string `path/nonce/query_string` is base64 encoded, then
            signed with HMAC-SHA256 using the secret key; the signature is
            the hex digest of that. `path` has neither the host nor the
            query string in it.
        """
        if not self.has_credentials:
            raise InvalidCredentialsException(
                "API & SECRET keys are needed to sign " + path)
        str_for_sign = '{}/{}/{}'.format(path, nonce, query_string)
        signature_str = base64.b64encode(str_for_sign.encode('utf-8'))
        signature = hmac.new(self.credentials.secret_key.encode('utf-8'),
            signature_str, hashlib.sha256)
        return signature.hexdigest()

    def _signRequest(self, path, query_string, nonce):
        """ Returns the authentication headers of a request """
        signature = self.getSignature(path, query_string, nonce)
        return {
            Kucoin.HEADER_API_KEY: self.credentials.api_key,
            Kucoin.HEADER_NONCE: str(nonce),
            Kucoin.HEADER_SIGNATURE: signature,
        }

    def _request(self, method, path, signed=False, params=None):
        """ Builds and sends one request, signing it if `signed`.

            Returns the requests.Response; connection errors, timeouts and
            non 2xx statuses are raised by requests as they are.
        """
        nonce = int(round(time.time()*1000))
        query_string = encodeQueryString(params)

        url = self.base_url + path
        if query_string:
            url = url + '?' + query_string

        headers = dict()
        if signed:
            headers = self._signRequest(path, query_string, nonce)

        logger.debug('%s %s (signed: %s)', method, url, signed)
        response = requests.request(
            method, url, headers=headers, timeout=self.timeout)
        response.raise_for_status()
        return response

    def request(self, method, path, params=None):
        """ Sends an unsigned request to `path` """
        return self._request(method, path, False, params)

    def signedRequest(self, method, path, params=None):
        """ Sends a signed request to `path` """
        return self._request(method, path, True, params)

    def _callEndpoint(self, name, params=None, **path_values):
        """ Sends the request described by ENDPOINTS[name].

            `path_values` fill path placeholders instead of `params`, for
            the few paths that don't use a parameter's value verbatim.
        """
        endpoint = Kucoin.ENDPOINTS[name]
        params = params or dict()
        path = formatPath(endpoint, dict(params, **path_values))
        return self._request(
            endpoint.method, path, endpoint.signed, shapeParams(endpoint, params))

    ################
    #### Public ####
    ################

    def getExchangeRates(self, symbols:list=None, **params):
        """ Gets exchange rates of coins against fiat currencies.
            Params
            --
                `symbols`
                    list of coins (e.g. ['BTC', 'ETH']); sent as a single
                    comma separated `coins` parameter
        """
        params['coins'] = ','.join(symbols) if symbols else ''
        return self._callEndpoint('getExchangeRates', params)

    def getLanguages(self):
        return self._callEndpoint('getLanguages')

    def getTicker(self, pair):
        """ Gets the latest tick of `pair` (e.g. 'KCS-BTC') """
        return self._callEndpoint('getTicker', dict(pair=pair))

    def getOrderBooks(self, pair, type=None, **params):
        """ Gets the order book of `pair`, or only one side of it when
        `type` is 'BUY' or 'SELL' """
        params = dict(pair=pair, **params)
        if type:
            params['type'] = type
            return self._callEndpoint(
                'getOrderBooksByType', params, type=type.lower())
        return self._callEndpoint('getOrderBooks', params)

    def getRecentlyDealtOrders(self, pair, **params):
        return self._callEndpoint(
            'getRecentlyDealtOrders', dict(pair=pair, **params))

    def getTradingSymbols(self):
        """ Gets all the pairs traded on the exchange, with their tick data """
        return self._callEndpoint('getTradingSymbols')

    def getTrending(self):
        return self._callEndpoint('getTrending')

    def getCoins(self):
        return self._callEndpoint('getCoins')

    ##############
    #### User ####
    ##############

    def changeLanguage(self, lang, **params):
        """ Changes the account's language, `lang` being one of the codes
        returned by getLanguages (e.g. 'en_US') """
        return self._callEndpoint('changeLanguage', dict(lang=lang, **params))

    def getUserInfo(self):
        return self._callEndpoint('getUserInfo')

    def getInviteCount(self):
        """ Gets the number of users invited through the account's
        referral code """
        return self._callEndpoint('getInviteCount')

    #################
    #### Account ####
    #################

    def getPromotionRewardInfo(self, symbol=None, **params):
        params = dict(symbol=symbol, **params)
        params['coin'] = symbol if symbol else ''
        return self._callEndpoint('getPromotionRewardInfo', params)

    def getPromotionRewardSummary(self, symbol=None):
        """ Gets the promotion reward summary, for one coin if `symbol`
        is given or for all of them otherwise """
        return self._callEndpoint(
            'getPromotionRewardSummary', dict(symbol=symbol))

    def getDepositAddress(self, symbol):
        return self._callEndpoint('getDepositAddress', dict(symbol=symbol))

    def createWithdrawal(self, symbol, amount, address, **params):
        """ Applies for a withdrawal of `amount` of `symbol` to `address` """
        return self._callEndpoint('createWithdrawal',
            dict(symbol=symbol, amount=amount, address=address, **params))

    def cancelWithdrawal(self, symbol, txOid, **params):
        return self._callEndpoint('cancelWithdrawal',
            dict(symbol=symbol, txOid=txOid, **params))

    def getDepositAndWithdrawalRecords(self, symbol, **params):
        """ Gets deposit & withdrawal records of `symbol`.
            Params
            --
                `type`
                    'DEPOSIT' or 'WITHDRAW'
                `status`
                    'FINISHED', 'CANCEL' or 'PENDING'
                `limit`, `page`
                    pagination
        """
        return self._callEndpoint('getDepositAndWithdrawalRecords',
            dict(symbol=symbol, **params))

    def getBalance(self, symbol=None):
        """ Gets the balance of `symbol`, or of every coin if it's None """
        return self._callEndpoint('getBalance', dict(symbol=symbol))

    #################
    #### Trading ####
    #################

    def createOrder(self, pair, type, price, amount, **params):
        """ Places a limit order.
            Params
            --
                `pair`
                    the pair to trade (e.g. 'KCS-BTC')
                `type`
                    Kucoin.ORDER_TYPE_BUY or Kucoin.ORDER_TYPE_SELL
                `price`, `amount`
                    price and quantity of the order; pass strings to keep
                    the exact decimal representation
        """
        return self._callEndpoint('createOrder',
            dict(pair=pair, type=type, price=price, amount=amount, **params))

    def getActiveOrders(self, pair, **params):
        return self._callEndpoint('getActiveOrders', dict(pair=pair, **params))

    def cancelOrder(self, pair, orderOid, type, **params):
        """ Cancels order `orderOid` of `pair`; `type` is the side of the
        order ('BUY' or 'SELL') """
        return self._callEndpoint('cancelOrder',
            dict(pair=pair, orderOid=orderOid, type=type, **params))

    def getDealtOrders(self, pair, **params):
        return self._callEndpoint('getDealtOrders', dict(pair=pair, **params))

    @classmethod
    def isValidResponse(cls, response:dict):
        """
        Checks whether a decoded payload received from the exchange is valid
        Returns
        --
        True if valid, False otherwise
        """
        return bool(response.get('success', False))
