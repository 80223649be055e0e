#!/usr/bin/env python3
"""Dump state vectors fetched through the opensky_states library.

Prints the decoded fields of every state vector, or writes the response
back out as ``/states/all`` JSON (handy for recording test fixtures such
as ``tests/testdata/sample.json``).

Usage
-----
::

    python scripts/dump_states.py --bbox 45.8389 5.9962 47.8229 10.5226

Options::

    --time TS               Unix timestamp (default: now)
    --icao24 HEX            Filter by transponder address (repeatable)
    --bbox LAMIN LOMIN LAMAX LOMAX
                            Filter by bounding box
    --json                  Output as machine-readable JSON
    --output FILE           Write output to FILE instead of stdout
    --limit N               Print at most N state vectors (text mode)

Environment variables ``OPENSKY_BASE_URL``, ``OPENSKY_USER_AGENT`` and
``OPENSKY_API_TRACE_ENABLED`` are honoured.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from opensky_states import (  # noqa: E402
    BoundingBox,
    OpenSkyClient,
    OpenSkyConfig,
    OpenSkyError,
    StatesRequest,
    StatesResponse,
    StateVector,
)

# ── helpers ──────────────────────────────────────────────────


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


def _format_state(state: StateVector) -> list[str]:
    lines = [f"  {state.icao24}  {state.callsign.strip() or '-'}  ({state.origin_country})"]
    for key, value in state.model_dump(exclude={"raw", "icao24", "callsign", "origin_country"}).items():
        lines.append(f"      {key}: {value}")
    lines.append(f"      position_source_kind: {state.position_source_kind.name}")
    return lines


def _response_to_wire(response: StatesResponse) -> dict[str, Any]:
    """Rebuild the ``/states/all`` JSON body from a decoded response."""
    return {
        "time": response.time,
        "states": [list(state.raw) for state in response.states] or None,
    }


# ── main ─────────────────────────────────────────────────────


async def main() -> None:
    parser = argparse.ArgumentParser(description="Dump OpenSky state vectors")
    parser.add_argument("--time", type=int, default=0, help="Unix timestamp (default: now)")
    parser.add_argument("--icao24", action="append", default=[], help="Transponder address (repeatable)")
    parser.add_argument(
        "--bbox",
        nargs=4,
        type=float,
        metavar=("LAMIN", "LOMIN", "LAMAX", "LOMAX"),
        help="Bounding box in decimal degrees",
    )
    parser.add_argument("--json", dest="json_mode", action="store_true", help="Output as JSON")
    parser.add_argument("--output", "-o", help="Write output to file")
    parser.add_argument("--limit", type=int, default=20, help="Max state vectors to print in text mode")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    bbox = None
    if args.bbox:
        bbox = BoundingBox(lat_min=args.bbox[0], lon_min=args.bbox[1], lat_max=args.bbox[2], lon_max=args.bbox[3])
    request = StatesRequest(time=args.time, icao24=args.icao24, bbox=bbox)

    config = OpenSkyConfig.from_env()
    try:
        async with OpenSkyClient(config) as client:
            response = await client.get_states(request)
    except OpenSkyError as exc:
        print(f"!! request failed: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    # ── Output ──
    if args.json_mode:
        payload = json.dumps(_response_to_wire(response), indent=2, ensure_ascii=False)
        if args.output:
            Path(args.output).write_text(payload, encoding="utf-8")
            print(f"JSON written to {args.output}", file=sys.stderr)
        else:
            print(payload)
        return

    out: list[str] = [_section("opensky_states dump_states")]
    out.append(f"  time      : {response.time} ({response.time_utc.isoformat() if response.time_utc else '-'})")
    out.append(f"  states    : {len(response.states)}")
    for state in response.states[: args.limit]:
        out.extend(_format_state(state))

    text = "\n".join(out)
    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        print(f"Output written to {args.output}")
    else:
        print(text)


if __name__ == "__main__":
    asyncio.run(main())
