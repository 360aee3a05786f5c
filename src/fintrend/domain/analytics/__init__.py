"""Analytics domain: time windows, series and KPIs."""
