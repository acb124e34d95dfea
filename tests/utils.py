from urllib.parse import urlsplit, parse_qsl

from mock import Mock
from requests import Response

# time.time() == 1700000000.0 under freeze_time(FROZEN_NOW)
FROZEN_NOW = '2023-11-14 22:13:20'
FROZEN_NONCE = 1700000000000


def mockResponse(status_code=200, payload=None):
	''' Returns a stand-in for requests.Response that raises nothing. '''
	response = Mock(spec=Response)
	response.status_code = status_code
	response.json.return_value = payload if payload is not None else {'success': True}
	return response


def errorResponse(status_code, url='https://api.kucoin.com/v1/user/info'):
	''' Returns a real requests.Response whose raise_for_status raises. '''
	response = Response()
	response.status_code = status_code
	response.url = url
	response._content = b'{"success": false, "code": "UNAUTH"}'
	return response


def sentRequest(mock_request, call_index=-1):
	''' Unpacks the (method, url, headers, timeout) of a patched
	requests.request call. '''
	call = mock_request.call_args_list[call_index]
	method, url = call[0]
	return method, url, call[1]['headers'], call[1]['timeout']


def splitUrl(url):
	''' Returns the path and the decoded query pairs of `url`. '''
	parts = urlsplit(url)
	return parts.path, parse_qsl(parts.query, keep_blank_values=True)
