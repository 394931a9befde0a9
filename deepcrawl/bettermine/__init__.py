"""Layered 3D mining map and the movable bots that mine it."""