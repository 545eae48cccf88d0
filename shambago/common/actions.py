"""
Actions offered by the home screen.

The UI dispatches on these variants rather than on the text shown to
the user.
"""

from enum import Enum


class FeatureAction(Enum):
    MARKET = ("Today's Market", "storefront")
    COMMUNITY = ("Community", "groups")
    SOIL_HEALTH = ("Soil Health", "grass")
    CROP_ALERT = ("Crop Alert", "warning")

    def __init__(self, title: str, icon: str):
        self.title = title
        self.icon = icon


class QuickAction(Enum):
    SCAN_CROP = ("Scan Crop", "photo_camera")
    SELL_PRODUCE = ("Sell Produce", "shopping_cart")
    GUIDE = ("Guide", "menu_book")

    def __init__(self, title: str, icon: str):
        self.title = title
        self.icon = icon
