import argparse
import logging
import sys

import pwdio
from audit import PolicyAudit, password_report
from password_generator import PolicyGenerator
from policy import VIOLATION_MESSAGES, first_violation
from substitution import substitute


def positive_int(value):
    n = int(value)
    if n <= 0:
        raise argparse.ArgumentTypeError(f'must be a positive integer, got {value}')
    return n


def build_parser():
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--verbose', action='store_true', help='print debug logging')

    parser = argparse.ArgumentParser(description='Password policy checker and generator')
    subparsers = parser.add_subparsers(dest='command', required=True)

    check = subparsers.add_parser('check', parents=[common], help='check a password against the policy')
    check.add_argument('password', type=str, help='password to check')
    check.add_argument('--report', action='store_true', help='print category counts of the password and its substituted form')

    generate = subparsers.add_parser('generate', parents=[common], help='generate passwords that satisfy the policy')
    generate.add_argument('--n', type=positive_int, default=1, help='number of passwords')
    generate.add_argument('--seed', type=int, default=None, help='random seed')
    generate.add_argument('--savepath', type=str, default='', help='write passwords to this file instead of printing them')

    audit = subparsers.add_parser('audit', parents=[common], help='check a password dataset and the generator')
    audit.add_argument('--testpath', type=str, required=True, help='password dataset (pwd \\t freq)')
    audit.add_argument('--n_samples', type=positive_int, default=10000, help='number of generated passwords')
    audit.add_argument('--seed', type=int, default=None, help='random seed')
    audit.add_argument('--plot', type=str, default='', help='save the length distribution plot to this file')

    convert = subparsers.add_parser('convert', parents=[common], help='convert a raw password list to a dataset file')
    convert.add_argument('--infile', type=str, required=True, help='one password per line')
    convert.add_argument('--outfile', type=str, required=True, help='dataset file to write')
    return parser


def substituted_text(pwd):
    sub = substitute(pwd)
    return 'With number substitution: \n' + (sub if sub is not None else '(unavailable)')


def check(args):
    violation = first_violation(args.password)
    if violation is None:
        print('Password is valid.')
        print(substituted_text(args.password))
    else:
        print('Password is NOT valid!')
        print(VIOLATION_MESSAGES[violation])
    if args.report:
        print(password_report(args.password))
    return 0 if violation is None else 1


def generate(args):
    passwords = PolicyGenerator(seed=args.seed).sample(args.n)
    if args.savepath:
        pwdio.write_passwords(args.savepath, passwords)
        print(f'wrote {len(passwords)} passwords to {args.savepath}')
    else:
        for pwd in passwords:
            print(pwd)
            print(substituted_text(pwd))
    return 0


def audit(args):
    auditor = PolicyAudit(PolicyGenerator(seed=args.seed), args.testpath)
    print(f'test path {args.testpath}')
    print(f'accounts: {auditor.total_accounts}, unique passwords: {auditor.df.shape[0]}')
    print(f'valid fraction: {auditor.valid_fraction():.4f}')
    for rule, n in auditor.violation_summary().items():
        print(f'  {rule}: {n}')
    auditor.sample(args.n_samples)
    print(f'acceptance rate: {auditor.acceptance_rate(args.n_samples):.4f}')
    lengths, shares = auditor.length_plot(savename=args.plot)
    for length, share in zip(lengths, shares):
        print(f'  length {length}: {share:.4f}')
    return 0


def convert(args):
    df = pwdio.raw_to_csv(args.infile, args.outfile)
    print(f'wrote {df.shape[0]} unique passwords to {args.outfile}')
    return 0


commands = {
    'check': check,
    'generate': generate,
    'audit': audit,
    'convert': convert,
}


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    return commands[args.command](args)


if __name__ == '__main__':
    sys.exit(main())
