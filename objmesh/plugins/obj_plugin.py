from objmesh.resources.obj_resource import ObjResource


class ObjPlugin:
    """Создаёт ObjResource для файлов *.obj."""

    def __init__(self, config=None):
        self.config = config

    def extensions(self) -> set[str]:
        return {"obj"}

    def create(self, path) -> ObjResource:
        return ObjResource(path, config=self.config)

    def __repr__(self) -> str:
        return "ObjPlugin()"


def register(manager):
    """Регистрирует загрузчик OBJ под расширением 'obj'."""
    manager.register_plugin(ObjPlugin())
