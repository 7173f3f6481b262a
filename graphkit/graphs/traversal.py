"""
Graph traversal: depth-first and breadth-first walks with visitor callbacks.

Both walks cover disconnected graphs by restarting from the lowest-id vertex
not yet visited. Adjacent edges are processed in ascending target-id order.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import Callable, Iterator, List, Set, Tuple

from .checker import GraphChecker
from .core import Graph
from .elements import Edge, Vertex

VertexConsumer = Callable[[Vertex], None]
EdgeConsumer = Callable[[Edge], None]


class Traverse(GraphChecker):
    """
    Visit every vertex of a graph.

    ``vertex_consumer`` is called once per vertex when it is reached.
    ``edge_consumer`` is called only for edges leading to a vertex that has
    not been visited yet, i.e. the edges of the traversal forest.

    Example:
        >>> order = []
        >>> Traverse(G, order.append, lambda e: None).dfs()
        >>> [v.name for v in order]
        ['A', 'B', 'C']
    """

    def __init__(self, graph: Graph, vertex_consumer: VertexConsumer, edge_consumer: EdgeConsumer):
        super().__init__(graph)
        self.check_empty()
        self.vertex_consumer = vertex_consumer
        self.edge_consumer = edge_consumer

    def dfs(self) -> None:
        """
        Depth-first walk.

        Runs on an explicit stack of adjacency iterators, which produces the
        same callback order as the recursive formulation without being bound
        by the interpreter recursion limit.

        Complexity: O(V + E) for sparse storage, O(V^2) for dense storage.
        """
        visited: Set[int] = set()
        for vertex in self.graph.get_vertexes():
            if vertex.id not in visited:
                self._dfs(vertex, visited)

    def _dfs(self, root: Vertex, visited: Set[int]) -> None:
        visited.add(root.id)
        self.vertex_consumer(root)
        stack: List[Tuple[Vertex, Iterator[Edge]]] = [(root, iter(self.graph.adjacent_edges(root.id)))]

        while stack:
            _, edges = stack[-1]
            edge = next(edges, None)
            if edge is None:
                stack.pop()
                continue
            target = edge.target
            if target.id in visited:
                continue
            self.edge_consumer(edge)
            visited.add(target.id)
            self.vertex_consumer(target)
            stack.append((target, iter(self.graph.adjacent_edges(target.id))))

    def bfs(self) -> None:
        """
        Breadth-first walk.

        A vertex is marked visited when it is enqueued, so each vertex is
        reported exactly once even when several edges reach it.

        Complexity: O(V + E) for sparse storage, O(V^2) for dense storage.
        """
        visited: Set[int] = set()
        for vertex in self.graph.get_vertexes():
            if vertex.id not in visited:
                self._bfs(vertex, visited)

    def _bfs(self, root: Vertex, visited: Set[int]) -> None:
        visited.add(root.id)
        queue = deque([root])

        while queue:
            u = queue.popleft()
            self.vertex_consumer(u)
            for edge in self.graph.adjacent_edges(u.id):
                target = edge.target
                if target.id in visited:
                    continue
                self.edge_consumer(edge)
                visited.add(target.id)
                queue.append(target)
