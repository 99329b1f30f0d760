"""layerdeps core: configuration, layer enumeration and dependency reconciliation."""
