#!/usr/bin/env python3
"""
Spherical Harmonic Visualizer Demo

Run this script to print, render, or interactively explore a spherical
harmonic Y_l^m on the sphere.

Examples:
    python demo.py --degree 4 --order 2 --table
    python demo.py -l 6 -m -3 --output y6_-3.png
    python demo.py --interactive
"""

import sys
from shviz.harmonics.examples import main as demo_main

if __name__ == "__main__":
    sys.exit(demo_main())
