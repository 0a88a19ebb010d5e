"""
Newton-Raphson Exercise
Finds the cube roots of eight, from a real and a complex initial guess, and plots the iterations.
"""

from rootfind.exercise import main

if __name__ == '__main__':
    main()
