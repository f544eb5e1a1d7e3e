"""Service layer: the decision rule and the polling loop that drives it."""
from btc_price_alert.services.polling_loop import run_cycle, run_monitor
from btc_price_alert.services.price_monitor import (commit_price,
                                                    record_alert,
                                                    relative_change,
                                                    should_alert)

__all__ = [
    "commit_price",
    "record_alert",
    "relative_change",
    "run_cycle",
    "run_monitor",
    "should_alert",
]
