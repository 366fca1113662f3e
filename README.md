# cubeworks

Building blocks for a small software 3D engine, with no dependencies
beyond the standard library.

## Modules

- `cubeworks.geometry.vectors`: `Vec2D`, `Vec3D` and `Vec4D`, immutable
  vectors. Equality is approximate: two vectors are equal when the squared
  length of their difference is below `EPS` (1e-6). They support `+`, `-`,
  unary `-`, `*` and `/` by a number, `abs()`, `sqr_abs()`, `length()` and
  `normalized()`. `Vec2D` and `Vec3D` also have `dot()`. `Vec3D` adds
  `cross()`, `make_point4d()` and `Vec3D.random()`. `Vec2D.from_vec4()` and
  `Vec3D.from_vec4()` build a vector from a `Vec4D`. Dividing a `Vec2D` or
  `Vec3D` by a number within `EPS` of zero raises `ValueError`.
- `cubeworks.geometry.matrix`: `Matrix4x4`, an immutable 4x4 matrix with
  `identity()`, `zero()`, `constant()`, `scale()`, `translation()`,
  `rotation_x()`, `rotation_y()`, `rotation_z()`, `rotation()` (Euler angles,
  applied as X @ Y @ Z), `rotation_axis()`, `view()`, `projection()` and
  `screen_space()`. Multiply it with a `Matrix4x4`, a `Vec4D` or a `Vec3D` using
  `@` or `*`. Multiplying a `Vec3D` applies only the upper-left 3x3 part.
  `x()`, `y()`, `z()` and `w()` return the upper three entries of each column.
- `cubeworks.geometry.plane`: `Plane(normal, point)`. The normal is
  normalised. `distance()` gives the signed distance of a point.
  `intersection(start, end)` returns the point where the line meets the
  plane and its parameter `k`.
- `cubeworks.physics.simplex`: `Simplex`, an ordered set of at most four
  points. `push_front()` drops the last point when the set is full.
  `SimplexType` names its size, from `ZERO` to `TETRAHEDRON`.
- `cubeworks.physics.hitbox`: `HitBox(points, use_simple_box=True)`. It is
  built in one of two ways:
  - The simple form holds the eight corners of the points' axis-aligned
    bounding box.
  - The detailed form holds the distinct points, sorted. Points within
    `EPS` are treated as one.
- `cubeworks.utils.timer`: `Timer`, a stopwatch with `start()`, `stop()`,
  `elapsed_seconds()` and `elapsed_milliseconds()`.
- `cubeworks.network.messages`: `MsgType`, the `NETWORK_*` constants, and
  `Packet`. A `Packet` is a byte buffer with big-endian `write_*` and `read_*`
  methods for `uint16`, `uint32`, `bool` and `MsgType`. A failed read or
  write raises `PacketError`.
- `cubeworks.network.reliable`: `ReliableMsg`, a packet that is resent every
  `NETWORK_RELIABLE_RETRY_TIME` seconds. `try_send()` returns `False` once
  `NETWORK_TIMEOUT` has passed.
- `cubeworks.network.connection`: `UDPConnection`, a known peer with an id,
  an address and the time it was last heard from.
- `cubeworks.network.udpsocket`: `UDPSocket`, a non-blocking UDP endpoint.
  - Every datagram is framed with the sender id, a reliable flag and a
    message id.
  - `send()` and `send_to()` send once. `send_rely()` and `send_rely_to()`
    resend until the peer confirms or the message times out.
  - `update()` drops peers that have timed out, calling the function given
    to `set_timeout_callback()`. It also resends reliable packets.
  - `receive()` returns `(msg_type, packet, sender_id)`.
  - A `CONNECT` message carrying `NETWORK_VERSION` registers the sender under
    the lowest free id from 1 to `NETWORK_MAX_CLIENTS`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import math

from cubeworks.geometry.matrix import Matrix4x4
from cubeworks.geometry.vectors import Vec3D, Vec4D
from cubeworks.network.messages import MsgType, Packet

a = Vec3D(1, 2, 3)
b = Vec3D(3, 4, 5)
print(a.dot(b))                  # 26
print(a.cross(b))
print(b.normalized().length())   # approximately 1.0

m = Matrix4x4.translation(Vec3D(5, 4, 3)) @ Matrix4x4.rotation_y(math.pi / 2)
print(m @ Vec4D(1, 0, 0, 1))

packet = Packet().write_msg_type(MsgType.INIT).write_uint16(7)
copy = Packet(packet.data())
print(copy.read_msg_type(), copy.read_uint16())   # MsgType.INIT 7
```

## What it does not do

The package provides primitives only:

- There is no renderer and no window.
- There is no frame clock and no logger.
- There is no collision-detection loop built on `Simplex` and `HitBox`.
- There are no client or server classes on top of `UDPSocket`. An
  application drives `UDPSocket` itself, calling `receive()` until it
  returns `MsgType.EMPTY` and then `update()` once per frame.