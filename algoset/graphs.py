"""Graph algorithms: ordering, components, safe nodes and tree walks."""

from collections import deque
from string import ascii_lowercase


def _kahn_order(adjacency, indegree):
    """Yield nodes in topological order, consuming indegree."""
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    while queue:
        node = queue.popleft()
        yield node
        for neighbour in adjacency[node]:
            indegree[neighbour] -= 1
            if indegree[neighbour] == 0:
                queue.append(neighbour)


def can_finish(num_courses, prerequisites):
    """Tell whether every course can be taken given [course, required] pairs."""
    adjacency = [[] for _ in range(num_courses)]
    indegree = [0] * num_courses
    for course, required in prerequisites:
        adjacency[course].append(required)
        indegree[required] += 1
    return sum(1 for _ in _kahn_order(adjacency, indegree)) == num_courses


def find_circle_num(is_connected):
    """Count connected groups in an adjacency matrix."""
    n = len(is_connected)
    neighbours = [
        [j for j, linked in enumerate(line) if linked == 1 and j != i]
        for i, line in enumerate(is_connected)
    ]
    visited = [False] * n
    provinces = 0
    for start in range(n):
        if visited[start]:
            continue
        provinces += 1
        visited[start] = True
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for other in neighbours[node]:
                if not visited[other]:
                    visited[other] = True
                    queue.append(other)
    return provinces


def eventual_safe_nodes(graph):
    """Sorted nodes from which every path ends at a terminal node."""
    reverse = [[] for _ in graph]
    outdegree = [len(targets) for targets in graph]
    for node, targets in enumerate(graph):
        for target in targets:
            reverse[target].append(node)
    return sorted(_kahn_order(reverse, outdegree))


def largest_path_value(colors, edges):
    """Most frequent colour count along any path, or -1 if the graph has a cycle.

    colors gives each node a lowercase letter; edges are [from, to] pairs.
    """
    n = len(colors)
    adjacency = [[] for _ in range(n)]
    indegree = [0] * n
    for source, target in edges:
        adjacency[source].append(target)
        indegree[target] += 1

    best = [dict.fromkeys(ascii_lowercase, 0) for _ in range(n)]
    for node, colour in enumerate(colors):
        best[node][colour] = 1

    visited = 0
    largest = 0
    for node in _kahn_order(adjacency, indegree):
        visited += 1
        counts = best[node]
        for neighbour in adjacency[node]:
            own = colors[neighbour]
            target = best[neighbour]
            for colour, count in counts.items():
                target[colour] = max(target[colour], count + (colour == own))
        largest = max(largest, max(counts.values()))
    return largest if visited == n else -1


def _halve(value):
    """Halve, rounding towards zero."""
    return value // 2 if value >= 0 else -(-value // 2)


def most_profitable_path(edges, bob, amount):
    """Best net income for Alice walking from node 0 to a leaf while Bob walks to 0.

    Gates reached first by one player are theirs in full; gates reached at the
    same moment are shared in half; gates Bob opened earlier give nothing.
    """
    n = len(amount)
    graph = [[] for _ in range(n)]
    for a, b in edges:
        graph[a].append(b)
        graph[b].append(a)

    parent = [-1] * n
    seen = [False] * n
    seen[0] = True
    queue = deque([0])
    while queue:
        node = queue.popleft()
        for neighbour in graph[node]:
            if not seen[neighbour]:
                seen[neighbour] = True
                parent[neighbour] = node
                queue.append(neighbour)

    bob_time = {}
    node, step = bob, 0
    while node != 0:
        bob_time[node] = step
        node = parent[node]
        step += 1

    best = None
    stack = [(0, -1, 0, 0)]
    while stack:
        node, came_from, score, time = stack.pop()
        arrival = bob_time.get(node)
        if arrival is None or arrival > time:
            score += amount[node]
        elif arrival == time:
            score += _halve(amount[node])
        children = [child for child in graph[node] if child != came_from]
        if not children:
            best = score if best is None else max(best, score)
            continue
        stack.extend((child, node, score, time + 1) for child in children)
    return best