#!/usr/bin/env python3
"""Smoke check against a running server: generate, download, reject blank prompt

Usage:
    uvicorn landing_synth.main:app --port 8000
    python scripts/smoke_generate.py --base-url http://127.0.0.1:8000
"""
import argparse
import sys
import httpx

PROMPTS = [
    "A minimal landing page with pricing",
    "Introducing Acme, a dark SaaS product with features, pricing and testimonials",
    "A creative agency site in purple with client reviews",
]


def check_generate(client: httpx.Client, prompt: str) -> bool:
    response = client.post("/api/generate", json={"prompt": prompt})
    if response.status_code != 200:
        print(f"     [ERROR] {response.status_code}: {response.text[:200]}")
        return False
    html = response.json()["html"]
    if not html.startswith("<!DOCTYPE html>"):
        print("     [ERROR] Response is not an HTML document")
        return False
    print(f"     [OK] {len(html)} chars for: {prompt[:60]}")
    return True


def check_download(client: httpx.Client) -> bool:
    response = client.post("/api/generate/download", json={"prompt": PROMPTS[0]})
    disposition = response.headers.get("content-disposition", "")
    if response.status_code != 200 or "landing-page.html" not in disposition:
        print(f"     [ERROR] Download failed: {response.status_code} {disposition}")
        return False
    print(f"     [OK] Download attachment: {disposition}")
    return True


def check_blank_rejected(client: httpx.Client) -> bool:
    response = client.post("/api/generate", json={"prompt": "   "})
    if response.status_code != 400:
        print(f"     [ERROR] Blank prompt returned {response.status_code}, expected 400")
        return False
    print(f"     [OK] Blank prompt rejected: {response.json().get('error')}")
    return True


def main():
    parser = argparse.ArgumentParser(description="Smoke check the landing page generator API")
    parser.add_argument('--base-url', default="http://127.0.0.1:8000", help="Server base URL")
    args = parser.parse_args()

    print("=" * 60)
    print("LANDING PAGE GENERATOR SMOKE CHECK")
    print("=" * 60)

    results = []
    with httpx.Client(base_url=args.base_url, timeout=10) as client:
        print("\n[1/3] Generating pages...")
        results.extend(check_generate(client, prompt) for prompt in PROMPTS)
        print("\n[2/3] Downloading a page...")
        results.append(check_download(client))
        print("\n[3/3] Rejecting a blank prompt...")
        results.append(check_blank_rejected(client))

    if not all(results):
        print("\n[FAILED] Smoke check failed")
        sys.exit(1)
    print("\n[OK] All smoke checks passed")


if __name__ == "__main__":
    main()
