class BSTError(Exception):
    def __str__(self):
        return ''.join(map(str, self.args))

class InvalidArgumentError(BSTError):
    def __str__(self):
        return "invalid argument: " + ''.join(map(str, self.args))

class NodeNotInTreeError(InvalidArgumentError):
    def __init__(self, node):
        super(NodeNotInTreeError, self).__init__(node)
        self.node = node

    def __str__(self):
        return "node " + str(self.node) + " is not part of this tree"

class InvalidKeyError(BSTError):
    def __init__(self, key):
        super(InvalidKeyError, self).__init__(key)
        self.key = key

    def __str__(self):
        return "invalid key: " + repr(self.key) + " (integer required)"

