"""Set all USDC allowances required for Polymarket trading.

Approves USDC.e and native USDC for the CTF Exchange, Neg Risk Exchange,
Neg Risk Adapter and Conditional Tokens contracts so the wallet can place
orders, sell positions and redeem outcomes.

Usage:
  python set_all_allowances.py
"""

import sys

from approver import TokenApprover
from config import Config
from contracts import MIN_NATIVE_BALANCE, USDC, USDC_E
from logger import logger, log_success
from models import RunSummary


def show_balances(approver: TokenApprover) -> None:
    """Print wallet balances and warn when gas funds look short."""
    logger.info("Fetching balances...")
    usdc_e_balance = approver.get_balance(USDC_E.address)
    usdc_balance = approver.get_balance(USDC.address)
    matic_balance = approver.get_native_balance()

    print()
    print(f"  USDC.e: ${float(usdc_e_balance):.2f}")
    print(f"  USDC:   ${float(usdc_balance):.2f}")
    print(f"  MATIC:  {float(matic_balance):.4f}")
    print()

    if matic_balance < MIN_NATIVE_BALANCE:
        logger.warning("MATIC balance is low, approval transactions may fail")


def print_summary(summary: RunSummary) -> None:
    print()
    print('=' * 60)
    if summary.failed == 0:
        log_success(f"All done! {summary.succeeded} approvals confirmed")
    else:
        logger.warning(f"Finished: {summary.succeeded} succeeded, {summary.failed} failed")
    print()


def main() -> int:
    """Main entry point."""
    try:
        settings = Config.load()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        print("\nPlease set PRIVATE_KEY and PROXY_WALLET in your .env file.")
        return 1

    print()
    print('=' * 60)
    print('   Polymarket USDC Approvals')
    print('=' * 60)
    print()

    logger.info(f"Wallet: {settings.wallet_address}")
    if settings.simulation_mode:
        logger.warning("SIMULATION_MODE is on, no transactions will be sent")

    try:
        approver = TokenApprover(settings)
        show_balances(approver)

        logger.info("Checking approvals...")
        print()
        summary = approver.run()

    except KeyboardInterrupt:
        logger.info("\nInterrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        return 1

    print_summary(summary)

    # Individual failures are reported above, not through the exit code
    return 0


if __name__ == "__main__":
    sys.exit(main())
