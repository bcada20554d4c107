from peewee import AutoField, IntegerField, Model, TextField
from infrastructure.peewee.session.db import db

class TaskModel(Model):
    id = AutoField()
    description = TextField()
    urgent = IntegerField(default=0)
    private = IntegerField(default=1)
    deadline = TextField(null=True)  # ISO 8601: 2021-03-16T09:00:00.000Z

    class Meta:
        database = db
        table_name = "tasks"
