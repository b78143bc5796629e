#!/usr/bin/env python3
"""
Gaussian Bayes network back-substitution
Builds or loads a network of conditional Gaussians and solves it
"""

import sys
import argparse
import logging

from gaussian_bayes import BayesNetFactory, GaussianBayesError, load_bayes_net, save_bayes_net


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Gaussian Bayes network back-substitution')

    parser.add_argument('-g', '--graph-type', type=str,
                        choices=['simple_chain', 'n_chain'],
                        default='simple_chain',
                        help='Example network to build')

    parser.add_argument('-n', '--size', type=int, default=None,
                        help='Chain length for n_chain (default: 5)')

    parser.add_argument('--dim', type=int, default=2,
                        help='Dimension of each variable for n_chain')

    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for n_chain')

    parser.add_argument('--load', type=str, default=None,
                        help='Load the network from a JSON file instead of building one')

    parser.add_argument('--save', type=str, default=None,
                        help='Save the network to a JSON file')

    parser.add_argument('--plot', action='store_true',
                        help='Plot the network with its solution')

    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Only print the solution')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    return parser


def main(argv=None) -> int:
    """Main function with argument parsing."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    try:
        if args.load:
            bayes_net = load_bayes_net(args.load)
            source = args.load
        else:
            bayes_net = BayesNetFactory.create_bayes_net(
                args.graph_type, size=args.size, dim=args.dim, seed=args.seed
            )
            source = args.graph_type

        if not args.quiet:
            print(f"=== Solving {source} ({len(bayes_net)} conditionals, dim {bayes_net.dim()}) ===")
            bayes_net.print("BayesNet")

        solution = bayes_net.optimize()
        solution.print("Solution")

        if args.save:
            save_bayes_net(args.save, bayes_net)
            if not args.quiet:
                print(f"• Saved network to {args.save}")
    except (GaussianBayesError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.plot:
        import matplotlib.pyplot as plt
        from gaussian_bayes.visualization import plot_bayes_net

        plot_bayes_net(bayes_net, solution=solution)
        plt.show(block=True)

    return 0


if __name__ == "__main__":
    sys.exit(main())
