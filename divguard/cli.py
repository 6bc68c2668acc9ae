import sys
from divguard.errors import DivGuardError
from divguard.program import run

def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    if args:
        print("Usage: python3 -m divguard.cli")
        sys.exit(1)

    try:
        run()

    except DivGuardError as e:
        print(e.pretty())
        sys.exit(1)

    except Exception as e:
        print(f"❌ Error: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
