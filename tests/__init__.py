"""
Tests for the TestRail API client.

Test modules:
- unit/test_endpoints: Address building
- unit/test_dispatcher: Dispatch and failure classification
- unit/test_pagination: Bulk page aggregation
- unit/test_list_decoder: Generic list decoding
- unit/test_lazy_value: Compute-once caching
- unit/test_entities: Entity decode/encode
- unit/test_config: Connection settings
- unit/test_structured_logger: Logging setup
- unit/test_http_client: requests transport
- unit/test_testrail_client: Resource operations
- integration/test_testrail_integration: Client through the real transport
"""
