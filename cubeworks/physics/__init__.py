"""Collision primitives: simplices and hit boxes."""