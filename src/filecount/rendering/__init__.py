"""Text rendering of scan reports."""
