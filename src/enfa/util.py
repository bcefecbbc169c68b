import collections

def group_by(iterable, key):
    result = collections.defaultdict(list)
    for value in iterable:
        result[key(value)].append(value)
    return result

def dfs(root, children):
    # Iterative so that long epsilon chains do not hit the recursion limit.
    visited = { root }
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        for child in children(node):
            if child not in visited:
                visited.add(child)
                stack.append(child)
