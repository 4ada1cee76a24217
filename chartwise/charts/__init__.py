"""Chart components and the chart-kind independent helpers they share."""
