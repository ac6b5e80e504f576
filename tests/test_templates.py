from sqlproto.templates import GrpcProtoTemplateData, ProtoField, RestProtoTemplateData


def _grpc():
    return GrpcProtoTemplateData(
        module="user",
        name="user",
        comment="用户",
        version="v1",
        fields=[
            ProtoField(name="id", type="int64", number=1, comment="用户ID"),
            ProtoField(name="last_login_time", type="int64", number=2, comment="最后登录时间"),
        ],
    )


def _rest():
    return RestProtoTemplateData(
        source_module="user",
        target_module="admin",
        name="user",
        version="v1",
        comment="用户",
    )


def test_grpc_package():
    assert _grpc().package() == "user.service.v1"


def test_grpc_package_lowercases_module():
    data = _grpc()
    data.module = "User"
    assert data.package() == "user.service.v1"


def test_grpc_names():
    data = _grpc()
    assert data.pascal_name() == "User"
    assert data.snake_name() == "user"


def test_grpc_names_multiword():
    data = GrpcProtoTemplateData(name="admin_login_log", module="admin", version="v1")
    assert data.pascal_name() == "AdminLoginLog"
    assert data.snake_name() == "admin_login_log"


def test_grpc_fields_kept_in_order():
    data = _grpc()
    assert [f.name for f in data.fields] == ["id", "last_login_time"]
    assert [f.number for f in data.fields] == [1, 2]


def test_rest_path():
    assert _rest().path() == "/admin/v1/users"


def test_rest_source_proto():
    assert _rest().source_proto() == "user/service/v1/user.proto"


def test_rest_packages():
    data = _rest()
    assert data.source_package() == "user.service.v1"
    assert data.target_package() == "admin.service.v1"


def test_rest_pascal_name():
    assert _rest().pascal_name() == "User"