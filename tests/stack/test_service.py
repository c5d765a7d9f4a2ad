def _service_properties(template) -> dict:
    services = template.find_resources("AWS::ECS::Service")
    assert len(services) == 1
    return next(iter(services.values()))["Properties"]


def test_service_placed_in_private_subnets_only(stack, template):
    private_subnet_refs = [stack.resolve(subnet.subnet_id) for subnet in stack.vpc.private_subnets]
    public_subnet_refs = [stack.resolve(subnet.subnet_id) for subnet in stack.vpc.public_subnets]
    subnets = _service_properties(template)["NetworkConfiguration"]["AwsvpcConfiguration"]["Subnets"]

    assert sorted(subnets, key=str) == sorted(private_subnet_refs, key=str)
    assert not any(subnet in public_subnet_refs for subnet in subnets)


def test_service_network_configuration(stack, template):
    service_sg_id = stack.get_logical_id(stack.service_security_group.node.default_child)
    properties = _service_properties(template)
    awsvpc = properties["NetworkConfiguration"]["AwsvpcConfiguration"]

    assert properties["LaunchType"] == "FARGATE"
    assert properties["PlatformVersion"] == "LATEST"
    assert awsvpc["AssignPublicIp"] == "ENABLED"
    assert awsvpc["SecurityGroups"] == [{"Fn::GetAtt": [service_sg_id, "GroupId"]}]


def test_single_target_bound_to_task_container(template):
    load_balancers = _service_properties(template)["LoadBalancers"]
    target_group_id = next(iter(template.find_resources("AWS::ElasticLoadBalancingV2::TargetGroup")))
    container_names = [
        container["Name"]
        for task_definition in template.find_resources("AWS::ECS::TaskDefinition").values()
        for container in task_definition["Properties"]["ContainerDefinitions"]
    ]

    assert len(load_balancers) == 1
    assert load_balancers[0]["ContainerName"] in container_names
    assert load_balancers[0]["ContainerPort"] == 80
    assert load_balancers[0]["TargetGroupArn"] == {"Ref": target_group_id}
