from src.priority_queue.heap import PriorityQueue
from src.priority_queue.topk import get_topk
