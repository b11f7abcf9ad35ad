from datetime import date

from hnb_exchange import HNBRequestsClient, __version__, get_rates, resolve_query
from hnb_exchange.render import format_records

print(__version__)  # 0.1.0

# Every currency for the last week (plus HNB's forward-dated bulletins)
rates = get_rates(past_days="7")
print(format_records(rates))

# A single currency over an explicit window
query = resolve_query("EUR", "2022-12-01", "2022-12-31")
with HNBRequestsClient() as client:
    eur = client.fetch(query)
print(eur[0])
# => ExchangeRateRecord(exchange_number='232', exchange_date=date(2022, 12, 1), ..., currency='EUR', ...)

# Resolving against a fixed "today"
print(resolve_query(past_days="3", today=date(2020, 8, 21)).as_params())
# => {'valuta': '', 'datum-primjene-od': '2020-08-18', 'datum-primjene-do': '2020-08-26'}
