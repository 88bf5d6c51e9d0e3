"""Pseudo-random values and a collision-avoiding seed for test data."""