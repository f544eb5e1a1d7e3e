"""Alert sinks invoked when the price moves past the threshold."""
from btc_price_alert.alerts.alert_sink_abc import AlertSinkABC
from btc_price_alert.alerts.sound import DEFAULT_ALERT_SOUND, SoundAlert

__all__ = ["AlertSinkABC", "DEFAULT_ALERT_SOUND", "SoundAlert"]
