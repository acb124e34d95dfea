from pykucoin.Exchanges.Kucoin import Kucoin

__version__ = '0.1.0'
