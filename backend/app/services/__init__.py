# Services package init
"""
Storefront API — Services Layer
=================================

What:  Logic that sits behind routes but is not part of the store.

Service Inventory:
    - WeatherService: Five-day demo forecast with injectable randomness

The product/order logic lives in app/store.py, since every rule there is an
identity check against the collections the store owns.
"""
