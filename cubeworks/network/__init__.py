"""Packets, reliable messages, peer connections and a non-blocking UDP socket."""