import argparse
import csv
import logging
import sys

import structlog

from .core import default_market_config, as_side
from .premium import evaluate_premium, premium_curve
from .solver import solve_barrier, solve_for_odds
from .validation import cdf_error, check_monotonicity


def _side(s: str):
    try:
        return as_side(s)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _configure_logging(verbose: bool):
    logging.basicConfig(stream=sys.stderr, format="%(message)s")
    logging.getLogger("digipricer").setLevel(logging.DEBUG if verbose else logging.WARNING)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def add_market(parser: argparse.ArgumentParser):
    d = default_market_config()
    parser.add_argument("--epoch-secs", dest="epoch_duration_secs", type=int, default=d.epoch_duration_secs)
    parser.add_argument("--settle-epochs", dest="settle_delay_epochs", type=int, default=d.settle_delay_epochs)
    parser.add_argument("--sigma2", type=float, default=d.sigma2, help="variance proxy (IV = sqrt)")
    parser.add_argument("--vega-buffer", dest="vega_buffer", type=float, default=d.vega_buffer)
    parser.add_argument("--call-lambda", dest="call_lambda", type=float, default=d.call_lambda, help="< 1")
    parser.add_argument("--put-lambda", dest="put_lambda", type=float, default=d.put_lambda, help="> 1")


def _market(args):
    return default_market_config().replace(
        epoch_duration_secs=args.epoch_duration_secs,
        settle_delay_epochs=args.settle_delay_epochs,
        sigma2=args.sigma2,
        vega_buffer=args.vega_buffer,
        call_lambda=args.call_lambda,
        put_lambda=args.put_lambda,
    )


def cmd_premium(args):
    px = evaluate_premium(args.spot, args.barrier, args.side, _market(args))
    print(f"{px:.10f}")


def cmd_solve(args):
    cfg = _market(args)
    if args.odds is not None:
        res = solve_for_odds(args.odds, args.spot, args.side, cfg,
                             tolerance=args.tol, max_iterations=args.max_iter)
    else:
        res = solve_barrier(args.premium, args.spot, args.side, cfg,
                            tolerance=args.tol, max_iterations=args.max_iter)
    print(f"premium  {res.target_premium:.6f}")
    print(f"barrier  {res.barrier:.6f}  ({res.percent_change:+.4f}%)")
    print(f"iters    {res.iterations}  converged={res.converged}  bracketed={res.bracketed}")


def cmd_curve(args):
    points = premium_curve(args.barrier, _market(args),
                           range_pct=args.range_pct, n_points=args.points)
    w = csv.writer(sys.stdout)
    w.writerow(["spot", "long_premium", "short_premium"])
    for p in points:
        w.writerow([f"{p.spot:.6f}", f"{p.long_premium:.10f}", f"{p.short_premium:.10f}"])


def cmd_validate(args):
    cfg = _market(args)
    err = cdf_error()
    print(f"cdf max abs error {err['max_abs_error']:.3e} at x={err['argmax']:.4f}")
    for side in ("long", "short"):
        mono = check_monotonicity(args.spot, side, cfg)
        print(f"{side:5s} monotone={mono['monotone']}  max_violation={mono['max_violation']:.3e}")


def main(argv=None):
    p = argparse.ArgumentParser(prog="digipricer", description="Digital option premium pricer")
    p.add_argument("-v", "--verbose", action="store_true")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_px = sub.add_parser("premium", help="digital premium at a barrier")
    p_px.add_argument("--spot", type=float, required=True)
    p_px.add_argument("--barrier", type=float, required=True)
    p_px.add_argument("--side", type=_side, default="long", help="long|short")
    add_market(p_px)
    p_px.set_defaults(func=cmd_premium)

    p_sv = sub.add_parser("solve", help="barrier for a target premium or odds")
    p_sv.add_argument("--spot", type=float, required=True)
    p_sv.add_argument("--side", type=_side, default="long", help="long|short")
    target = p_sv.add_mutually_exclusive_group(required=True)
    target.add_argument("--premium", type=float)
    target.add_argument("--odds", type=float, help="e.g. 10 -> premium 0.1")
    p_sv.add_argument("--tol", type=float, default=1e-6)
    p_sv.add_argument("--max-iter", dest="max_iter", type=int, default=100)
    add_market(p_sv)
    p_sv.set_defaults(func=cmd_solve)

    p_cv = sub.add_parser("curve", help="long/short premium vs spot (CSV)")
    p_cv.add_argument("--barrier", type=float, required=True)
    p_cv.add_argument("--range-pct", dest="range_pct", type=float, default=30.0)
    p_cv.add_argument("--points", type=int, default=50)
    add_market(p_cv)
    p_cv.set_defaults(func=cmd_curve)

    p_va = sub.add_parser("validate", help="CDF accuracy and solver monotonicity")
    p_va.add_argument("--spot", type=float, default=100.0)
    add_market(p_va)
    p_va.set_defaults(func=cmd_validate)

    args = p.parse_args(argv)
    _configure_logging(args.verbose)
    args.func(args)

if __name__ == "__main__":
    main()
