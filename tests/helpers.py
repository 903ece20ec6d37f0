"""Canned upstream responses shared by the client tests."""

import json

import requests


def make_response(body, status_code: int = 200) -> requests.Response:
    """Build a requests.Response carrying ``body`` (raw text or a JSON-able object)."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = "OK" if status_code == 200 else "Error"
    resp.encoding = "utf-8"
    resp.headers["Content-Type"] = "application/json"
    text = body if isinstance(body, str) else json.dumps(body)
    resp._content = text.encode("utf-8")
    return resp


STORE_LOCATOR_BODY = {
    "Status": 0,
    "Granularity": "Exact",
    "Stores": [
        {
            "StoreID": "4626",
            "IsDeliveryStore": True,
            "IsOpen": True,
            "ServiceMethodEstimatedWaitMinutes": {
                "Delivery": {"Min": 23, "Max": 33},
                "Carryout": {"Min": 7, "Max": 12},
            },
        },
        {
            "StoreID": "4336",
            "IsDeliveryStore": False,
            "ServiceMethodEstimatedWaitMinutes": {
                "Delivery": {"Min": 0, "Max": 0},
            },
        },
        {
            "StoreID": "4631",
            "IsDeliveryStore": True,
            "ServiceMethodEstimatedWaitMinutes": {
                "Delivery": {"Min": 31, "Max": 41},
            },
        },
    ],
}

MENU_BODY = {
    "Status": 0,
    "Variants": {
        "14SCREEN": {
            "Code": "14SCREEN",
            "Name": "Large (14\") Hand Tossed Pizza",
            "Price": "13.99",
            "ProductCode": "S_PIZZA",
        },
        "P14IRECZ": {
            "Code": "P14IRECZ",
            "Name": "Large (14\") Brooklyn ExtravaganZZa Feast",
            "Price": "18.99",
        },
        "20BCOKE": {
            "Code": "20BCOKE",
            "Name": "20oz Bottle Coke",
            "Price": "2.00",
        },
    },
}

PRICE_ORDER_BODY = """{
    "Status": 1,
    "Order": {
        "OrderID": "d4Gq8VnWx1a2b3c4d5e6",
        "StoreID": "4626",
        "AmountsBreakdown": {
            "FoodAndBeverage": "18.99",
            "DeliveryFee": "2.99",
            "Tax": 1.08,
            "Customer": 22.06
        }
    }
}"""
