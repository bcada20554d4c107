import os

# Los módulos de sesión leen DATABASE_URL al importarse.
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
