from pykucoin.Utils.QueryString import encodeQueryString
