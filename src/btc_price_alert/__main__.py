from btc_price_alert.main import run

run()
