"""Generate a reproducibility script from a JSON/YAML request file."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# ---- sys.path bootstrap (run from a checkout without installing) ----
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
# ----------------------------------------------------------------------

from policy_repro.core.config import resolve_year  # noqa: E402
from policy_repro.core.errors import ReproCodeError  # noqa: E402
from policy_repro.core.generators import get_reproducibility_code_block, render_script  # noqa: E402
from policy_repro.core.request_loader import load_request_file  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description=__doc__)
    ap.add_argument("request", help="Path to a .json/.yaml request file")
    ap.add_argument("--out", default=None, help="Write the script here instead of stdout")
    ap.add_argument("--no-header", action="store_true", help="Omit the generated-file docstring")
    ap.add_argument("--json", action="store_true", help="Print the line list as JSON")
    args = ap.parse_args(argv)

    try:
        req = load_request_file(args.request)
        lines = get_reproducibility_code_block(
            req.type,
            req.metadata,
            req.policy,
            req.region,
            req.year,
            req.household_input,
            req.earning_variation,
        )
    except ReproCodeError as e:
        print(f"[error] {e.code}: {e}", file=sys.stderr)
        return 2

    if args.json:
        output = json.dumps(
            {
                "type": req.type.value,
                "region": req.region,
                "year": resolve_year(req.year),
                "lines": lines,
            },
            ensure_ascii=False,
            indent=2,
        ) + "\n"
    else:
        output = render_script(
            lines,
            type=req.type,
            region=req.region,
            year=req.year,
            header=not args.no_header,
        )

    if args.out:
        out = Path(args.out)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(output, encoding="utf-8")
        print(f"Wrote reproducibility script: {out}")
    else:
        sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
