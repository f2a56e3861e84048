"""Value types shared by alignment, scoring and result aggregation."""
