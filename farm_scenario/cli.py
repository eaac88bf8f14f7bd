"""
Farm Scenario - Command Line Interface

Usage:
    farm-scenario <command> [options]

Commands:
    simulate    Run one scenario and print the result
    compare     Run the same inputs for several crops and tabulate them
    defaults    Show default inputs and valid ranges
    optimize    Show the balanced input preset
    crops       List crops with baseline yield and price
    serve       Start the FastAPI server
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from .config import CROP_PARAMS, DEFAULT_SCENARIO, LOG_LEVEL, LOG_FORMAT, LOG_DATEFMT
from .orchestrator import ScenarioOrchestrator
from .params import PARAM_RANGES, SimulationParams, ValidationError, default_params, optimized_params
from .report import export_history, header, history_to_frame

log = logging.getLogger("farm_scenario")


def _add_param_args(p: argparse.ArgumentParser):
    d = DEFAULT_SCENARIO
    p.add_argument("--crop", default=d["crop_type"], help="Crop type")
    p.add_argument("--season", default=d["season"])
    p.add_argument("--irrigation", type=int, default=d["irrigation_frequency"], help="Waterings per week")
    p.add_argument("--fertilizer", type=float, default=d["fertilizer_amount"], help="kg/hectare")
    p.add_argument("--pesticides", type=float, default=d["pesticides"], help="kg/hectare")
    p.add_argument("--land", type=float, default=d["land_size"], help="Hectares")
    p.add_argument("--labor-cost", type=float, default=d["labor_cost"], help="₹/hectare")
    p.add_argument("--seed-cost", type=float, default=d["seed_cost"], help="₹/hectare")
    p.add_argument("--machinery", type=float, default=d["machinery"], help="₹/hectare")
    p.add_argument("--transportation", type=float, default=d["transportation"], help="₹/hectare")
    p.add_argument("--language", default="en", help="Suggestion language (en, hi)")


def _params_from_args(args, crop=None) -> SimulationParams:
    return SimulationParams.from_dict({
        "crop_type": crop or args.crop,
        "season": args.season,
        "irrigation_frequency": args.irrigation,
        "fertilizer_amount": args.fertilizer,
        "pesticides": args.pesticides,
        "land_size": args.land,
        "labor_cost": args.labor_cost,
        "seed_cost": args.seed_cost,
        "machinery": args.machinery,
        "transportation": args.transportation,
    })


def _report_invalid(e: ValidationError) -> int:
    print("Invalid parameters:", file=sys.stderr)
    for err in e.errors:
        rng = PARAM_RANGES.get(err.field)
        hint = f" (valid: {rng.describe()})" if rng else ""
        print(f"  - {err.field}: {err.reason}{hint}", file=sys.stderr)
    return 2


# ═══════════════════════════════════════════════════════════════════════════════
# COMMANDS
# ═══════════════════════════════════════════════════════════════════════════════

def cmd_simulate(args) -> int:
    params = _params_from_args(args)
    if args.optimize:
        params = optimized_params(params)

    orchestrator = ScenarioOrchestrator(language=args.language)
    try:
        result = orchestrator.run(params)
    except ValidationError as e:
        return _report_invalid(e)

    print(result.to_json() if args.json else result.to_text())

    if args.output:
        out = Path(args.output).expanduser().resolve()
        out.write_text(result.to_json(), encoding="utf-8")
        print(f"Saved: {out}")
    return 0


def cmd_compare(args) -> int:
    orchestrator = ScenarioOrchestrator(language=args.language)
    for crop in args.crops:
        try:
            orchestrator.run(_params_from_args(args, crop=crop))
        except ValidationError as e:
            return _report_invalid(e)

    df = history_to_frame(orchestrator.history, args.language)
    df.insert(1, header("crop", args.language), args.crops[-len(df):])
    print(df.to_string(index=False))

    if args.export:
        path = export_history(orchestrator.history, args.export, args.format, args.language)
        print(f"Exported: {path}")
    return 0


def cmd_defaults(args) -> int:
    print(json.dumps({
        "params": default_params().to_dict(),
        "ranges": {name: rng.describe() for name, rng in PARAM_RANGES.items()},
    }, indent=2))
    return 0


def cmd_optimize(args) -> int:
    print(json.dumps(optimized_params(_params_from_args(args)).to_dict(), indent=2))
    return 0


def cmd_crops(args) -> int:
    for name, p in CROP_PARAMS.items():
        print(f"{name:<10} base yield {p['base_yield_t_ha']:>5} t/ha | "
              f"₹{p['price_per_ton']:>6,}/t | seasons: {', '.join(p['seasons'])}")
    return 0


def cmd_serve(args) -> int:
    from .api import run_server
    run_server(host=args.host, port=args.port)
    return 0


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    parser = argparse.ArgumentParser(prog="farm-scenario", description="Farm scenario simulation")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("simulate", help="Run one scenario")
    _add_param_args(p)
    p.add_argument("--optimize", action="store_true", help="Apply the balanced preset first")
    p.add_argument("--json", action="store_true", help="Print JSON instead of text")
    p.add_argument("--output", help="Write the result JSON to this file")
    p.set_defaults(func=cmd_simulate)

    p = sub.add_parser("compare", help="Compare crops under the same inputs")
    _add_param_args(p)
    p.add_argument("--crops", nargs="+", default=list(CROP_PARAMS.keys()))
    p.add_argument("--export", help="Write the comparison table to this file")
    p.add_argument("--format", choices=["csv", "parquet"], default=None)
    p.set_defaults(func=cmd_compare)

    p = sub.add_parser("defaults", help="Show default inputs")
    p.set_defaults(func=cmd_defaults)

    p = sub.add_parser("optimize", help="Show the balanced preset")
    _add_param_args(p)
    p.set_defaults(func=cmd_optimize)

    p = sub.add_parser("crops", help="List crops")
    p.set_defaults(func=cmd_crops)

    p = sub.add_parser("serve", help="Start the API server")
    p.add_argument("--host", default=None)
    p.add_argument("--port", type=int, default=None)
    p.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
