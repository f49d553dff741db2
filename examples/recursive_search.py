# This file is part of Forgetful.
#
# Copyright the Forgetful Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Follow a chain of single-successor edges until reaching a node with no
successor, using an Observer to notice when the chain loops back on itself.

One Observer is shared between both searches in main(). The second search
only works because every observation made by the first was released while
its CycleDetected error propagated.

To run this example, install forgetful and from the root of a checkout run

python examples/recursive_search.py
"""

from forgetful import Observer


class CycleDetected(Exception):
    pass


def find_leaf(graph, node, seen):
    observation = seen.notice(node)
    if observation is None:
        raise CycleDetected("cycle detected!")
    with observation:
        if node in graph:
            return find_leaf(graph, graph[node], seen)
        return node


def main():
    graph = {"A": "B", "B": "C", "C": "A", "D": "E"}

    seen = Observer()

    # Should print: "error: cycle detected!"
    try:
        print("found %s!" % (find_leaf(graph, "A", seen),))
    except CycleDetected as err:
        print("error: %s" % (err,))

    # Should print: "found E!"
    try:
        print("found %s!" % (find_leaf(graph, "D", seen),))
    except CycleDetected as err:
        print("error: %s" % (err,))


if __name__ == "__main__":
    main()
