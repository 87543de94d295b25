"""User identity as carried by a verified bearer token."""


class User:
    def __init__(self, id: str, email: str = "", name: str = ""):
        self.id = id
        self.email = email
        self.name = name

    def __repr__(self) -> str:
        return f"User({self.id}, {self.email})"

    def to_claims(self):
        return {"userId": self.id, "email": self.email, "name": self.name}

    @staticmethod
    def from_claims(claims):
        '''Builds a User from decoded token claims; returns None if the subject is missing.'''
        user_id = claims.get("userId") if isinstance(claims, dict) else None
        if not user_id:
            return None
        return User(str(user_id), claims.get("email") or "", claims.get("name") or "")
