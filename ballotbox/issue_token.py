import argparse

from ballotbox.config import ACCESS_TOKEN_EXPIRE_MINUTES
from ballotbox.security import create_access_token


def main(argv=None):
    parser = argparse.ArgumentParser(description="Issue a bearer token for a caller identity.")
    parser.add_argument("identity", help="caller identity, e.g. a wallet address")
    parser.add_argument(
        "--minutes",
        type=int,
        default=ACCESS_TOKEN_EXPIRE_MINUTES,
        help="token lifetime in minutes",
    )
    args = parser.parse_args(argv)
    if args.minutes <= 0:
        parser.error("--minutes must be positive")
    if not args.identity.strip():
        parser.error("identity must not be empty")

    print(create_access_token(args.identity, expires_delta=args.minutes))


if __name__ == "__main__":
    main()
