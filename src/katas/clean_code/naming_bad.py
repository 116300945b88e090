"""Naming - anti-pattern.

Cryptic identifiers and magic numbers: the reader has to reverse-engineer what
``a``, ``s``, ``18`` and ``0.2`` mean.
"""


class U:
    def __init__(self, a, s, p):
        self.a = a
        self.s = s
        self.p = p


class UserService:
    def chk(self, u):
        if u.a >= 18 and u.s == "ACT":
            return True
        return False

    def calc(self, p, t):
        if t == "VIP":
            return p * 0.2
        return p * 0.05

    def lyl(self, u):
        return u.p >= 1000
