"""Minimal Flask JSON frontend for the creature lookup service."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from flask import Flask, jsonify, request

from .clients import CreatureNotFoundError
from .lookup import CreatureLookupService
from .models import CreatureRecord


load_dotenv()

logger = logging.getLogger(__name__)

# One service per process so the catalog cache lives as long as the app.
service = CreatureLookupService()

app = Flask(__name__)
app.config["SECRET_KEY"] = os.getenv("FLASK_SECRET_KEY", "change-me")


def _record_payload(record: CreatureRecord) -> dict:
    return record.model_dump(by_alias=True)


def _lookup_response(query: str):
    try:
        record = service.lookup(query)
    except CreatureNotFoundError as exc:
        logger.info("Lookup for %r failed: %s", query, exc)
        return jsonify({"error": "Creature not found"}), 404
    return jsonify(_record_payload(record)), 200


@app.route("/api/creatures/<path:query>")
def creature_detail(query: str):
    return _lookup_response(query)


@app.route("/api/creatures")
def creature_search():
    query = request.args.get("q", "")
    if not query.strip():
        return jsonify({"error": "Query parameter 'q' is required"}), 400
    return _lookup_response(query)


@app.route("/api/catalog")
def catalog():
    entries = service.browse_all()
    filtered = service.search_catalog(request.args.get("q", ""))
    return jsonify(
        {
            "total": len(entries),
            "shown": len(filtered),
            "creatures": [entry.model_dump() for entry in filtered],
        }
    )


@app.route("/health")
def health():
    # Simple health check for load balancers
    return {"status": "ok"}, 200


if __name__ == "__main__":
    logging.basicConfig(level=os.getenv("CREATURE_LOG_LEVEL", "INFO").upper())
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "4000")), debug=True)
