#!/usr/bin/env python3
"""
Smoke test of the shop assistant dialogue (English and German questions).

Run:
  python scripts/smoke_dialog.py

Options:
  --products         Product JSON file (default: products.json)
  --print-answers    Print full answers
  --dialog           Also run the multi-turn dialogue
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from shopbot.core.services.chatbot_service import ChatbotService
from shopbot.core.services.handler_registry import IntentHandlerRegistry
from shopbot.core.services.intent_classifier import IntentClassifier
from shopbot.infrastructure.catalogs.json_catalog import JsonProductCatalog

TESTS = [
    {
        "q": "Hello!",
        "expect_any": ["Welcome"],
    },
    {
        "q": "How much is the laptop?",
        "expect_all": ["Laptop", "€999.00"],
    },
    {
        "q": "Was kostet die Tastatur?",
        "expect_any": ["couldn't identify", "Mechanical Keyboard"],
    },
    {
        "q": "Is the rain jacket in stock?",
        "expect_all": ["Rain Jacket", "out of stock"],
    },
    {
        "q": "What are the cheapest products?",
        "expect_all": ["Dark Chocolate", "Teddy-Bear", "Espresso Beans"],
        "expect_none": ["Laptop"],
    },
    {
        "q": "Show me the most expensive items",
        "expect_all": ["Laptop", "Mechanical Keyboard"],
        "expect_none": ["Dark Chocolate"],
    },
    {
        "q": "Show products under 20 euros",
        "expect_all": ["under €20", "T-Shirt"],
        "expect_none": ["Laptop", "Jeans"],
    },
    {
        "q": "Show electronics between 20 and 200 euros",
        "expect_all": ["Electronics", "Wireless Mouse"],
        "expect_none": ["Laptop"],
    },
    {
        "q": "Hilfe",
        "expect_any": ["You can ask me"],
    },
    {
        "q": "blorp",
        "expect_any": ["not sure I understood"],
    },
]

DIALOGUE = [
    "Hi",
    "Show me the laptop",
    "How much is it?",
    "Is it available?",
    "Show clothing",
    "What about food under 10 euros?",
    "help",
]


def normalize(text: str) -> str:
    return (text or "").lower()


def check_expectations(answer: str, test: dict) -> list[str]:
    errors = []
    ans = normalize(answer)

    expect_any = test.get("expect_any") or []
    expect_all = test.get("expect_all") or []
    expect_none = test.get("expect_none") or []

    if expect_any:
        if not any(normalize(x) in ans for x in expect_any):
            errors.append(f"missing any of: {expect_any}")

    for token in expect_all:
        if normalize(token) not in ans:
            errors.append(f"missing: {token}")

    for token in expect_none:
        if normalize(token) in ans:
            errors.append(f"should not contain: {token}")

    return errors


def build_chatbot(products_path: str) -> ChatbotService:
    return ChatbotService(
        classifier=IntentClassifier(),
        registry=IntentHandlerRegistry(),
        catalog=JsonProductCatalog(products_path),
    )


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--products", default="products.json")
    parser.add_argument("--print-answers", action="store_true")
    parser.add_argument("--dialog", action="store_true")
    args = parser.parse_args()

    failures = 0
    for idx, test in enumerate(TESTS, start=1):
        q = test["q"]
        print(f"\nQ{idx}: {q}")
        # Fresh conversation per question
        answer = build_chatbot(args.products).respond(q)
        if args.print_answers:
            print("A:", answer)

        errors = check_expectations(answer, test)
        if errors:
            failures += 1
            print("FAIL:", "; ".join(errors))
        else:
            print("OK")

    if failures:
        print(f"\nFAILED: {failures} test(s) failed")
        sys.exit(1)
    print("\nALL OK")

    if args.dialog:
        chatbot = build_chatbot(args.products)
        print("\nDIALOGUE:\n")
        for idx, q in enumerate(DIALOGUE, start=1):
            print(f"U{idx}: {q}")
            print(f"A{idx}: {chatbot.respond(q)}\n")
    return 0


if __name__ == "__main__":
    main()
