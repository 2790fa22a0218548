from argparse  import ArgumentParser
from globmatch import GlobParams, MatchResult, match

if __name__ == "__main__":
    parser = ArgumentParser(description="Match subjects against a glob")
    parser.add_argument("pattern")
    parser.add_argument("subject", nargs="+")
    parser.add_argument("--flags", default="",
        help="glob flags, e.g. '-sets' to read '[' literally")
    args = parser.parse_args()

    params = GlobParams.from_flags(args.flags)
    for subject in args.subject:
        result = match(subject, args.pattern, params)
        print(f"{result.name:<15} {subject}")
        if result == MatchResult.INVALID_PATTERN:
            break
