from src.priority_queue import PriorityQueue
from src.priority_queue.topk import get_topk


costs = [10.5, 3.2, 15.0, 7.8, 20.1, 1.5]
nodes = ["low", "very_low", "medium", "low_med", "high", "lowest"]

# Open list of (cost, node) pairs, starting small to force a growth
print("Creating priority queue...")
heap = PriorityQueue(4)
for cost, node in zip(costs, nodes):
    heap.push((cost, node))

print(f"Heap size: {len(heap)}")
print(f"Capacity: {heap.capacity}")
print(f"Is empty: {heap.is_empty()}")
print(f"Cheapest two: {get_topk(heap, 2)}")

while not heap.is_empty():
    cost, node = heap.pop()
    print(f"{cost:>6.1f} {node}")

# Bulk construction from an unordered sequence
heap = PriorityQueue.from_sequence([4, 4, 4, 1])
print(f"Bulk built: {[heap.pop() for _ in range(len(heap))]}")
