from enum import Enum


class VarResource(Enum):
    APPLICATION_ENV = "application_environment_variable"
    APPLICATION_CONFIG = "application_config_variable"
    DEVICE_ENV = "device_environment_variable"
    DEVICE_CONFIG = "device_config_variable"
    SERVICE_ENV = "service_environment_variable"
    DEVICE_SERVICE_ENV = "device_service_environment_variable"


# (config, device, service) -> resource; config wins over service.
_VAR_RESOURCES = {
    (False, False, False): VarResource.APPLICATION_ENV,
    (False, False, True): VarResource.SERVICE_ENV,
    (False, True, False): VarResource.DEVICE_ENV,
    (False, True, True): VarResource.DEVICE_SERVICE_ENV,
    (True, False, False): VarResource.APPLICATION_CONFIG,
    (True, False, True): VarResource.APPLICATION_CONFIG,
    (True, True, False): VarResource.DEVICE_CONFIG,
    (True, True, True): VarResource.DEVICE_CONFIG,
}


def get_var_resource(config=False, device=False, service=False):
    return _VAR_RESOURCES[(bool(config), bool(device), bool(service))]


def get_var_resource_name(config=False, device=False, service=False):
    return get_var_resource(config, device, service).value
