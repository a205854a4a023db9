from rowreduce import calculate_determinant, calculate_inverse, is_identity
import numpy as np

A = np.array([[4.0, 7.0, 2.0], [3.0, 6.0, 1.0], [2.0, 5.0, 3.0]])

steps, result = calculate_determinant(A)
for step in steps:
    print(step.description)
print('det =', result.determinant, '(numpy:', np.linalg.det(A), ')')

steps, result = calculate_inverse(A)
for step in steps:
    print(step, '\n')
print('A @ inv is identity:', is_identity(A @ result.final_matrix, tol=1e-8))

# singular: the reduced left half is returned instead of an inverse
steps, result = calculate_inverse([[1, 2], [2, 4]])
print(steps[-1].description)
print(result)
