"""
scanner_client.py

HTTP client for a barcode scanning station talking to the Floor Stock API.

What it provides:
- FloorStockClient: scan-in / scan-out plus the read endpoints
- A small CLI that reads barcodes from stdin (one per line) and posts each
  as an IN or OUT movement on the given floor

Environment variables expected:
- FLOORSTOCK_API_URL: e.g. "http://localhost:3000"

Usage:
  python scanner_client.py in --floor "Ground Floor" --name "Blue Mug"
  python scanner_client.py out --floor "2nd Floor"
"""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests


class ApiError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass
class FloorStockClient:
    base_url: str
    timeout: float = 30

    def _request(self, method: str, path: str, *, json: Any = None, params: Dict[str, Any] | None = None) -> Any:
        url = f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
        resp = requests.request(
            method,
            url,
            json=json,
            params=params,
            headers={"Accept": "application/json"},
            timeout=self.timeout,
        )
        if resp.status_code >= 400:
            try:
                message = resp.json().get("error") or resp.text
            except ValueError:
                message = resp.text
            raise ApiError(f"{method} {path} failed ({resp.status_code}): {message}", resp.status_code)
        return resp.json()

    # ----------------------------
    # Movements
    # ----------------------------

    def scan_in(self, *, barcode: str, floor: str, product_name: Optional[str] = None) -> Dict:
        """
        Calls: POST /api/scan-in
        product_name only matters the first time a barcode is seen.
        """
        payload: Dict[str, Any] = {"barcode": barcode, "floor": floor}
        if product_name:
            payload["productName"] = product_name
        return self._request("POST", "/api/scan-in", json=payload)["product"]

    def scan_out(self, *, barcode: str, floor: str) -> Dict:
        """
        Calls: POST /api/scan-out
        Raises ApiError (400, "No stock") when the floor holds none of the item.
        """
        return self._request("POST", "/api/scan-out", json={"barcode": barcode, "floor": floor})["product"]

    # ----------------------------
    # Reads
    # ----------------------------

    def list_products(self) -> list:
        return self._request("GET", "/api/products")["products"]

    def get_product(self, barcode: str) -> Dict:
        return self._request("GET", f"/api/products/{barcode}")

    def get_stats(self) -> Dict:
        return self._request("GET", "/api/stats")["stats"]

    def list_logs(self, *, barcode: Optional[str] = None, limit: int = 100) -> list:
        params: Dict[str, Any] = {"limit": limit}
        if barcode:
            params["barcode"] = barcode
        return self._request("GET", "/api/logs", params=params)["logs"]


def make_client_from_env() -> FloorStockClient:
    base_url = os.getenv("FLOORSTOCK_API_URL", "").strip()
    if not base_url:
        raise RuntimeError("Missing FLOORSTOCK_API_URL")
    return FloorStockClient(base_url=base_url)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Post scanned barcodes to the Floor Stock API")
    parser.add_argument("action", choices=["in", "out"])
    parser.add_argument("--floor", required=True)
    parser.add_argument("--name", default=None, help="product name for unseen barcodes (scan-in only)")
    args = parser.parse_args(argv)

    client = make_client_from_env()
    failures = 0
    for line in sys.stdin:
        barcode = line.strip()
        if not barcode:
            continue
        try:
            if args.action == "in":
                product = client.scan_in(barcode=barcode, floor=args.floor, product_name=args.name)
            else:
                product = client.scan_out(barcode=barcode, floor=args.floor)
        except ApiError as e:
            failures += 1
            print(f"{barcode}: {e}", file=sys.stderr)
            continue
        print(f"{barcode}: {product['product_name']} stock={product['current_stock']}")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
