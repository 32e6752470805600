"""tablemint — sequential identifier issuance and table-backed metadata locators."""

__version__ = "0.1.0"
