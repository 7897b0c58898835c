import getopt
import sys
import os

from . import log
from .exception import BSTError
from .tree.bstree import Node, BinarySearchTree

import bstlab

def _parse_key(s):
    return int(s, 0)

def _parse_node(arg):
    key, sep, payload = arg.partition('=')
    return Node(_parse_key(key), payload if sep else None)

def _node_str(node):
    return 'none' if node is None else str(node)

def _lookup(tree, key):
    node = tree.find(key)
    if node is None:
        raise BSTError("no node with key ", key, " in tree")
    return node

def build_tree(args):
    tree = BinarySearchTree()
    for arg in args:
        try:
            node = _parse_node(arg)
        except ValueError:
            raise BSTError("invalid key `", arg, "'")
        log.debug1("inserting ", node.key)
        tree.insert(node)
    log.info("inserted ", len(args), " node(s)")
    return tree

def run_queries(tree, options, out):
    for key in options['delete']:
        log.debug1("deleting ", key)
        tree.delete_node(_lookup(tree, key))

    if options['walk']:
        for s in tree.inorder_walk(tree.root, []):
            out.write(s + "\n")

    if options['find'] is not None:
        out.write("find {0:d}: {1:s}\n".format(options['find'],
            _node_str(tree.find(options['find']))))
    if options['successor'] is not None:
        node = _lookup(tree, options['successor'])
        out.write("successor of {0:d}: {1:s}\n".format(node.key,
            _node_str(tree.get_successor(node))))
    if options['predecessor'] is not None:
        node = _lookup(tree, options['predecessor'])
        out.write("predecessor of {0:d}: {1:s}\n".format(node.key,
            _node_str(tree.get_predecessor(node))))
    if options['min']:
        out.write("min: " + _node_str(tree.get_min(tree.root)) + "\n")
    if options['max']:
        out.write("max: " + _node_str(tree.get_max(tree.root)) + "\n")
    if options['height']:
        out.write("height: {0:d}\n".format(tree.get_height(tree.root)))

def bstlab_main(argv):
    log.logger = log.Logger(logfile=sys.stderr)
    (options, keys) = parse_arguments(argv)
    try:
        tree = build_tree(keys)
        run_queries(tree, options, sys.stdout)
    except BSTError as e:
        log.fatal(e)
    return 0

def default_options():
    opts = {
            'delete' : [],
            'find' : None,
            'successor' : None,
            'predecessor' : None,
            'min' : False,
            'max' : False,
            'height' : False,
            'walk' : True,
            }
    return opts

def invalid_argument(opt, arg):
    log.fatal_exit(2, "invalid " + opt + " argument `" + str(arg) + "'")

def _key_argument(opt, arg):
    try:
        return _parse_key(arg)
    except ValueError:
        invalid_argument(opt, arg)

def parse_arguments(argv):
    long_opts = [
            'delete=',
            'find=',
            'successor=',
            'predecessor=',
            'min',
            'max',
            'height',
            'quiet',
            'help',
            'verbose',
            'color=',
            'version'
    ]
    options = default_options()
    opts = 'd:f:s:p:mMHqhv'
    try:
        opts, args = getopt.gnu_getopt(argv[1:], opts, long_opts)
    except getopt.GetoptError as err:
        log.fatal_exit(2, err, "\n", "Try `",
                str(os.path.basename(argv[0])),
                " --help' for more information.")

    for opt, arg in opts:
        if opt in ('-h', '--help'):
            usage(os.path.basename(argv[0]))
            sys.exit(0)

        elif opt in ('-d', '--delete'):
            options['delete'].append(_key_argument(opt, arg))

        elif opt in ('-f', '--find'):
            options['find'] = _key_argument(opt, arg)

        elif opt in ('-s', '--successor'):
            options['successor'] = _key_argument(opt, arg)

        elif opt in ('-p', '--predecessor'):
            options['predecessor'] = _key_argument(opt, arg)

        elif opt in ('-m', '--min'):
            options['min'] = True

        elif opt in ('-M', '--max'):
            options['max'] = True

        elif opt in ('-H', '--height'):
            options['height'] = True

        elif opt in ('-q', '--quiet'):
            options['walk'] = False

        elif opt in ('-v', '--verbose'):
            log.logger.loglevel += 1

        elif opt in ('--color',):
            try:
                log.logger.set_colors(arg)
            except ValueError:
                invalid_argument(opt, arg)

        elif opt in ('--version',):
            version()
            sys.exit(0)

        else:
            invalid_argument(opt, "")

    return (options, args)

def version():
    sys.stdout.write("bstlab " + bstlab.__version__ + "\n")


def usage(program_name):
    sys.stdout.write(
            'Usage: {0:s} [option]... key[=payload]...'
            .format(program_name))
    sys.stdout.write(
'''
Insert keys into a binary search tree one at a time, then print its in-order
walk. Each node is printed as (key,parent,left,right).

Options:
      --version              show program's version number and exit
  -h, --help                 show this help message and exit
  -v, --verbose              increase verbosity level (use multiple times for
                               greater effect)
      --color=WHEN           colorize output; WHEN can be 'auto' (default),
                               'always' or 'never'.

Tree operations:
  -d, --delete=KEY           delete the node with KEY after all insertions
                               (may be given multiple times)
  -f, --find=KEY             print the node with KEY
  -s, --successor=KEY        print the successor of the node with KEY
  -p, --predecessor=KEY      print the predecessor of the node with KEY
  -m, --min                  print the node with the minimum key
  -M, --max                  print the node with the maximum key
  -H, --height               print the height of the tree
  -q, --quiet                do not print the in-order walk
''')

def main():
    try:
        sys.exit(bstlab_main(sys.argv))
    except KeyboardInterrupt:
        sys.stderr.write("\nreceived SIGINT, terminating\n")
        sys.exit(3)
