#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging

from hypermedia.query import QueryAPI, ResourceLink

ARTICLES = {
    "1": {"id": "1", "title": "Rails is Omakase", "author": "9", "comments": ["5", "12"]},
    "2": {"id": "2", "title": "Kubernetes by hand", "author": "9", "comments": []},
}
PEOPLE = {"9": {"id": "9", "name": "Dan", "company": "3"}}
COMPANIES = {"3": {"id": "3", "name": "Example Corp"}}
COMMENTS = {
    "5": {"id": "5", "body": "First!", "author": "9"},
    "12": {"id": "12", "body": "I like XML better", "author": "9"},
}
STORE = {"articles": ARTICLES, "people": PEOPLE, "companies": COMPANIES, "comments": COMMENTS}

# include path -> (linked kind, parent kind, attribute holding the IDs)
RELATIONS = {
    "author": ("people", "articles", "author"),
    "comments": ("comments", "articles", "comments"),
    "author.company": ("companies", "people", "company"),
}


def fetch_resources(kind, ids, fields, filters, sortings):
    rows = [STORE[kind][id_] for id_ in ids if id_ in STORE[kind]]
    for key, values in filters.items():
        rows = [row for row in rows if str(row.get(key)) in values]
    for spec in reversed(sortings or []):
        rows.sort(key=lambda row: str(row.get(spec.field, "")), reverse=spec.direction == "DESC")
    if fields:
        rows = [{name: row[name] for name in ["id", *fields] if name in row} for row in rows]
    return rows


def resolve_linked_ids(path, resources):
    kind, parent, attribute = RELATIONS[path]
    ids: list[str] = []
    for row in resources.get(parent, []):
        value = STORE[parent][row["id"]].get(attribute)
        for id_ in value if isinstance(value, list) else [value]:
            if id_ not in ids:
                ids.append(id_)
    return kind, ids


def resolve_link(path, document):
    kind = RELATIONS[path][0]
    return ResourceLink(href=f"/{kind}/{{{document.primary_kind}.{path}}}", kind=kind)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Resolve a query against an in-memory article store")
    p.add_argument("query", nargs="?", default="include=author,comments,author.company&sort=-title")
    p.add_argument("--debug", action="store_true")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    api = QueryAPI(
        "articles",
        fetch_ids=lambda: list(ARTICLES),
        fetch_resources=fetch_resources,
        filter_allowed=lambda key: key in {"author"},
        resolve_link=resolve_link,
        resolve_linked_ids=resolve_linked_ids,
    )
    print(json.dumps(api.resolve_query_string(args.query), indent=2))


if __name__ == "__main__":
    main()
