"""Vectors, 4x4 matrices and planes."""