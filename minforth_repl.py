import argparse
import logging
import sys

import minforth

PROMPT = ''


def forth_repl(machine, read=input):
    print('Type "bye" or input an end of file (Ctrl+D) to quit.')

    try:
        cmd = read(PROMPT)
        while cmd.lower() != 'bye':
            print(machine.eval(cmd))
            cmd = read(PROMPT)
    except EOFError:
        pass  # perfectly acceptable


def evaluate_all(machine, expressions):
    """ Prints the result of each expression; returns how many failed. """
    failures = 0
    for expr in expressions:
        result, error = machine.try_evaluate(expr)
        if error is not None:
            print('%s: %s' % (expr, error), file=sys.stderr)
            failures += 1
        else:
            print(result)
    return failures


def cli_main(argv=None):
    parser = argparse.ArgumentParser(
        description='Evaluate stack-based configuration expressions',
        prog='minforth',
    )
    parser.add_argument('-e', '--expr', action='append',
        help='evaluate an expression and print its result (may be repeated)')
    parser.add_argument('--strict', action='store_true', help='reject malformed numbers instead of using 0')
    parser.add_argument('-v', '--verbose', action='store_true', help='log every push, pop and word')
    parser.add_argument('--version', action='store_true', help='print version and exit')
    args = parser.parse_args(argv)

    if args.version:
        raise SystemExit('minforth {}'.format(minforth.__version__))

    if args.verbose:
        logging.basicConfig(format='%(name)s: %(message)s', level=logging.DEBUG, stream=sys.stderr)

    machine = minforth.Machine(strict=args.strict)

    if args.expr:
        return 1 if evaluate_all(machine, args.expr) else 0

    import readline  # line editing for input()
    forth_repl(machine)
    return 0


if __name__ == '__main__':
    sys.exit(cli_main())
