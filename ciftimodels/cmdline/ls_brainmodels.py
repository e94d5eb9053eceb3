#!python
# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the ciftimodels package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""
Output a summary table of the brain models of CIFTI-2 files
"""

import sys
from optparse import Option, OptionParser

import ciftimodels as cm
import ciftimodels.cmdline.utils
from ciftimodels.cmdline.utils import _err, fmt_number, table2string, verbose


def get_opt_parser():
    # use module docstring for help output
    p = OptionParser(
        usage=f'{sys.argv[0]} [OPTIONS] [FILE ...]\n\n' + __doc__,
        version='%prog ' + cm.__version__,
    )

    p.add_options(
        [
            Option(
                '-v',
                '--verbose',
                action='count',
                dest='verbose',
                default=0,
                help='Make more noise.  Could be specified multiple times',
            ),
            Option(
                '-d',
                '--dimension',
                type='int',
                dest='dimension',
                default=None,
                help='Only list brain models of the index map for this matrix dimension',
            ),
        ]
    )

    return p


def proc_file(f, opts):
    verbose(1, f'Loading {f}')

    try:
        records = cm.get_brain_model(f, dimension=opts.dimension, verbose=opts.verbose > 0)
    except (OSError, cm.BrainModelError) as e:
        verbose(2, f'Failed to gather brain models -- {e}')
        return [[f'@l{f}', _err()]]

    rows = []
    for position, record in enumerate(records):
        rows.append(
            [
                f'@l{f}',
                f'@r{position}',
                f'@l{record.kind}',
                f'@l{record.brain_structure or "-"}',
                f'@r{fmt_number(record.index_offset)}',
                f'@r{fmt_number(record.index_count)}',
                f'@r{len(record)}',
            ]
        )
    if not rows:
        rows.append([f'@l{f}', '-'])
    return rows


def main(args=None):
    """Show must go on"""

    parser = get_opt_parser()
    (opts, files) = parser.parse_args(args=args)

    ciftimodels.cmdline.utils.verbose_level = opts.verbose

    if ciftimodels.cmdline.utils.verbose_level >= 3:
        # show per-model parsing messages
        cm.logger.level = 10

    rows = [row for f in files for row in proc_file(f, opts)]

    print(table2string(rows), end='')
