"""Shared entry-point wrapper: one uncaught error ends the run with exit 1"""

import sys
import traceback


def run(procedure):
    """Run a procedure; print any error and exit 1 on failure"""
    try:
        procedure()
    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        # web3 errors keep (message, data) in args
        print(f"\nError: {getattr(e, 'message', None) or e}", file=sys.stderr)
        traceback.print_exc()
        sys.exit(1)
