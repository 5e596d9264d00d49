import argparse
import logging
import math
import sys

from .core import OptionParams, CALL, PUT
from .black_scholes import price, vega, parity_gap
from .implied_vol import implied_vol
from .bachelier import bachelier_implied_vol_atm
from .errors import PricingError

logger = logging.getLogger(__name__)


def _kind(s: str):
    s = s.lower()
    if s in {"call", "c"}:
        return CALL
    if s in {"put", "p"}:
        return PUT
    raise argparse.ArgumentTypeError("kind must be 'call' or 'put'")

def add_contract(parser: argparse.ArgumentParser):
    parser.add_argument("--S", type=float, required=True, help="underlying price")
    parser.add_argument("--K", type=float, required=True, help="strike")
    parser.add_argument("--T", type=float, required=True, help="years")
    parser.add_argument("--r", type=float, required=True, help="cont. risk-free")
    parser.add_argument("--q", type=float, default=0.0, help="cont. dividend yield")
    parser.add_argument("--kind", type=_kind, default=CALL, help="call|put")

def _params(args) -> OptionParams:
    return OptionParams(args.kind, args.r, args.T, args.sigma, args.K, args.S, args.q)

def cmd_price(args):
    print(f"{price(_params(args)):.10f}")

def cmd_vega(args):
    print(f"{vega(_params(args)):.10f}")

def cmd_iv(args):
    sigma = implied_vol(
        args.kind, args.price, args.r, args.T, args.K, args.S, args.q,
        initial_guess=args.guess, tol=args.tol, maxiter=args.maxiter,
    )
    print(f"{sigma:.10f}")

def cmd_bachelier(args):
    print(f"{bachelier_implied_vol_atm(args.price, args.S, args.T, args.r):.10f}")

def cmd_demo(args):
    """Reference scenario: S=K=100, r=5%, q=0, T=1y, sigma=20%."""
    S, K, r, q, T, sigma = 100.0, 100.0, 0.05, 0.0, 1.0, 0.20
    call = OptionParams(CALL, r, T, sigma, K, S, q)
    put = call.with_kind(PUT)

    call_px, put_px = price(call), price(put)
    rhs = S * math.exp(-q * T) - K * math.exp(-r * T)
    print(f"Call price   = {call_px}")
    print(f"Put price    = {put_px}")
    print(f"Call vega    = {vega(call)}")
    print(f"Put vega     = {vega(put)}")
    print(f"Call - Put   = {call_px - put_px}")
    print(f"Parity RHS   = {rhs}")
    print(f"Difference   = {parity_gap(call)}")

    iv = implied_vol(CALL, 10.450583572185565, r, T, K, S)
    print(f"Implied vol  = {iv}")

    atm_px = S * sigma / math.sqrt(2.0 * math.pi)
    print(f"Bachelier ATM implied vol = {bachelier_implied_vol_atm(atm_px, S, T, r)}")

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ivpricer",
                                description="European option pricing and implied volatility")
    p.add_argument("-v", "--verbose", action="count", default=0,
                   help="-v for solver warnings, -vv for per-iteration detail")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Black-Scholes price / vega
    p_px = sub.add_parser("price", help="Black-Scholes price")
    add_contract(p_px)
    p_px.add_argument("--sigma", type=float, required=True)
    p_px.set_defaults(func=cmd_price)

    p_vg = sub.add_parser("vega", help="Black-Scholes vega (dPrice/dSigma)")
    add_contract(p_vg)
    p_vg.add_argument("--sigma", type=float, required=True)
    p_vg.set_defaults(func=cmd_vega)

    # Implied vol
    p_iv = sub.add_parser("iv", help="Black-Scholes implied volatility")
    add_contract(p_iv)
    p_iv.add_argument("--price", type=float, required=True, help="market price")
    p_iv.add_argument("--guess", type=float, default=0.2)
    p_iv.add_argument("--tol", type=float, default=1e-8)
    p_iv.add_argument("--maxiter", type=int, default=100)
    p_iv.set_defaults(func=cmd_iv)

    # Bachelier ATM
    p_ba = sub.add_parser("bachelier", help="Bachelier ATM implied volatility")
    p_ba.add_argument("--price", type=float, required=True, help="option price")
    p_ba.add_argument("--S", type=float, required=True)
    p_ba.add_argument("--T", type=float, required=True, help="years")
    p_ba.add_argument("--r", type=float, default=0.0, help="unused by the ATM formula")
    p_ba.set_defaults(func=cmd_bachelier)

    p_demo = sub.add_parser("demo", help="price, parity and implied-vol walkthrough")
    p_demo.set_defaults(func=cmd_demo)
    return p

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    level = {0: logging.ERROR, 1: logging.WARNING}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    try:
        args.func(args)
    except PricingError as exc:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
