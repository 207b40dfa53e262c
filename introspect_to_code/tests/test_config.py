from introspect_to_code.pipeline.config import CodeGeneratorConfig


def test_defaults():
    config = CodeGeneratorConfig()

    assert config.package == "org.xbmc.android.jsonrpc.api.model"
    assert config.model_suffix == "Model"
    assert config.ignore_types == []
    assert not config.strict_registration


def test_from_dict_ignores_unknown_keys():
    config = CodeGeneratorConfig.from_dict({"model_suffix": "", "class_modules": ["parcelable"], "language": "cs"})

    assert config.model_suffix == ""
    assert config.class_modules == ["parcelable"]
    assert not hasattr(config, "language")


def test_to_dict_round_trip():
    config = CodeGeneratorConfig(package="com.example", indent="    ", parent_module="abstract_model")

    assert CodeGeneratorConfig.from_dict(config.to_dict()) == config
