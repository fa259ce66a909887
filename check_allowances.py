"""Check all USDC allowances for Polymarket without sending transactions."""

import sys

from approver import TokenApprover
from config import Config
from contracts import ALREADY_APPROVED_THRESHOLD, APPROVAL_TASKS, MAX_APPROVAL, USDC_DECIMALS
from logger import logger


def describe_allowance(allowance: int) -> str:
    if allowance == MAX_APPROVAL:
        return "unlimited"
    return f"${allowance / 10**USDC_DECIMALS:,.2f}"


def main() -> int:
    try:
        settings = Config.load()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    try:
        approver = TokenApprover(settings)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        return 1

    print(f'Checking Allowances for Wallet: {approver.owner}\n')
    print('=' * 70)

    all_good = True

    for task in APPROVAL_TASKS:
        try:
            allowance = approver.get_allowance(task.token.address, task.spender.address)
        except Exception as e:
            logger.error(f"{task.label}: {e}")
            all_good = False
            continue

        ok = allowance > ALREADY_APPROVED_THRESHOLD
        print(f'  {task.label:32s} {describe_allowance(allowance):>20s} {"[OK]" if ok else "[NOT SET]"}')
        if not ok:
            all_good = False

    print('=' * 70)
    if all_good:
        print('[OK] All allowances are properly set!')
        return 0

    print('[ERROR] Some allowances are missing - run set_all_allowances.py')
    return 1


if __name__ == "__main__":
    sys.exit(main())
