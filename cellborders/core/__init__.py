"""This package defines the cellborders engine and its components."""

__app_name__ = "cellborders"
__version__ = "0.3.0"
__strapline__ = "Custom cell borders for spreadsheet grids"
__author__ = "The cellborders developers"
__copyright__ = f"© 2024, {__author__}"
__license__ = "MIT"
