"""Format - anti-pattern.

One class, one giant method switching on an action string, and no naming
convention: ``AddUsr``, ``find_user`` and ``deleteUSER`` sit side by side.
"""


class Mgr:
    def __init__(self):
        self.p = {1: {"n": "Laptop", "s": 50, "pr": 1200, "dp": None}}
        self.o = []
        self.USERS = []

    def do_stuff(self, action, data):
        if action == "upd":
            x = self.p.get(data["id"])
            if x == None:
                return None
            x["s"] = x["s"] - data["q"]
            x["dp"] = x["pr"] * data["d"]
            print("notificacion: producto " + str(data["id"]) + " actualizado")
            return x
        elif action == "ord":
            t = 0
            for i in data["items"]:
                t += i["price"] * i["quantity"]
            self.o.append({"id": data["id"], "t": t, "pm": data["pm"]})
            return True
        elif action == "usr":
            self.USERS.append({"Name": data["n"], "mail": data["e"], "AGE": data["a"]})
            return self.USERS[-1]
        return None

    def AddUsr(self, n, e, a):
        return self.do_stuff("usr", {"n": n, "e": e, "a": a})

    def find_user(self, e):
        for u in self.USERS:
            if u["mail"] == e:
                return u

    def deleteUSER(self, e):
        self.USERS = [u for u in self.USERS if u["mail"] != e]
