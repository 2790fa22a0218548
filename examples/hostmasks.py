from argparse  import ArgumentParser
from irctokens import hostmask
from globmatch import Mask, MaskOr

if __name__ == "__main__":
    parser = ArgumentParser(description="Check hostmasks against ban masks")
    parser.add_argument("hostmask")
    parser.add_argument("mask", nargs="+")
    args = parser.parse_args()

    bans = MaskOr(*[Mask(m) for m in args.mask])
    if bans.match(hostmask(args.hostmask)):
        print(f"{args.hostmask} is banned")
    else:
        print(f"{args.hostmask} is not banned")
