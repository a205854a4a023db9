from rowreduce import solve, format_result
import logging

logging.basicConfig(level=logging.INFO)

# 2x1 + x2 - x3 = 8, -3x1 - x2 + 2x3 = -11, -2x1 + x2 + 2x3 = -3
system = [[2, 1, -1, 8], [-3, -1, 2, -11], [-2, 1, 2, -3]]

for operation in ['gaussian elimination', 'rref']:
    steps, result = solve(system, operation)
    print(f"=== {operation}: {len(steps)} steps")
    for i, step in enumerate(steps):
        print(f"[{i}] {step}\n")
    print(format_result(result))
