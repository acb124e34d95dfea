import os
import sys
curr_path = os.path.abspath(__file__)
root_path = os.path.abspath(
	os.path.join(curr_path, os.path.pardir, os.path.pardir))
sys.path.append(root_path)

import logging
from pprint import pprint

from pykucoin.Exchanges.Kucoin import Kucoin

logging.basicConfig(level=logging.DEBUG)

exchange = Kucoin(get_credentials_from_env=True, timeout=10)

ticker = exchange.getTicker('KCS-BTC').json()
pprint(ticker)

rates = exchange.getExchangeRates(symbols=['BTC', 'ETH']).json()
if Kucoin.isValidResponse(rates):
	pprint(rates['data'])

if exchange.has_credentials:
	balance = exchange.getBalance('KCS').json()
	pprint(balance)

	orders = exchange.getActiveOrders('KCS-BTC').json()
	pprint(orders)
else:
	print("Set KUCOIN_API_KEY and KUCOIN_API_SECRET to try the private endpoints.")
