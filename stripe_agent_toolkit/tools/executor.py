"""
Tool Executor
-------------
Permission-gated dispatch of Stripe tools.

Every call makes one linear pass:
1. Resolve the method in the registry
2. Re-check permissions from the context (even if the caller filtered already)
3. Validate parameters against the tool schema
4. Merge context (default customer, connected-account scoping)
5. Invoke the Stripe operation with a timeout
6. Project the result, or collapse any upstream failure to "Failed to <operation>"

A failure at any step short-circuits. Nothing is retried.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, auto
from typing import Any, Dict, List, Mapping, Optional
import concurrent.futures
import contextvars
import logging
import time

from ..core.context import Context
from ..core.errors import (
    ErrorCategory,
    ErrorHandler,
    MissingRequiredField,
    PermissionDenied,
    ToolkitError,
    UpstreamFailure,
)
from ..infra.logging import CallContext
from ..security.permissions import filter_tools, missing_actions
from .operations import OPERATIONS, OperationFn
from .registry import Tool, ToolRegistry, create_default_registry


class ExecutionStatus(Enum):
    """Status of tool execution."""
    SUCCESS = auto()
    UNKNOWN_METHOD = auto()
    PERMISSION_DENIED = auto()
    VALIDATION_ERROR = auto()
    MISSING_REQUIRED_FIELD = auto()
    UPSTREAM_FAILURE = auto()


_STATUS_BY_CATEGORY = {
    ErrorCategory.UNKNOWN_METHOD: ExecutionStatus.UNKNOWN_METHOD,
    ErrorCategory.PERMISSION_DENIED: ExecutionStatus.PERMISSION_DENIED,
    ErrorCategory.VALIDATION_ERROR: ExecutionStatus.VALIDATION_ERROR,
    ErrorCategory.MISSING_REQUIRED_FIELD: ExecutionStatus.MISSING_REQUIRED_FIELD,
    ErrorCategory.UPSTREAM_FAILURE: ExecutionStatus.UPSTREAM_FAILURE,
}


@dataclass
class ExecutionResult:
    """Result of tool execution."""
    method: str
    status: ExecutionStatus
    output: Any = None
    error: Optional[str] = None
    execution_time_ms: float = 0.0
    call_id: Optional[str] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def success(self) -> bool:
        return self.status == ExecutionStatus.SUCCESS

    def __repr__(self) -> str:
        status = "✓" if self.success else "✗"
        return f"ExecutionResult({status} {self.method}: {self.output if self.success else self.error})"


class ToolExecutor:
    """
    Dispatcher between the calling agent and the Stripe client.

    Rules:
    - Only registered, permitted tools are dispatched
    - Parameters are validated before anything reaches Stripe
    - Upstream error detail is logged, never returned
    - Holds no per-call state; safe to share across threads
    """

    def __init__(
        self,
        client: Any,
        registry: Optional[ToolRegistry] = None,
        timeout_seconds: float = 30.0,
        inject_customer: bool = True,
        operations: Optional[Mapping[str, OperationFn]] = None,
        error_handler: Optional[ErrorHandler] = None,
    ):
        self.client = client
        self.registry = registry or create_default_registry()
        self.timeout_seconds = timeout_seconds
        self.inject_customer = inject_customer
        self._operations = dict(operations or OPERATIONS)
        self._errors = error_handler or ErrorHandler()
        self._logger = logging.getLogger("stripe_agent_toolkit.tools.executor")

        unbound = [tool.method for tool in self.registry if tool.method not in self._operations]
        if unbound:
            raise ValueError(f"No operation bound for tools: {unbound}")

    # -- catalog -------------------------------------------------------------

    def list_tools(self, context: Optional[Context] = None) -> List[Tool]:
        """Tools callable under the context's permission configuration."""
        context = context or Context()
        return filter_tools(self.registry.list(), context.permissions)

    def describe_tools(self, context: Optional[Context] = None) -> List[Dict[str, Any]]:
        """
        Tool descriptors for the calling agent.

        When a default customer is bound, invoicing tools stop advertising
        their `customer` parameter.
        """
        context = context or Context()
        descriptors = []
        for tool in self.list_tools(context):
            schema = tool.schema
            if tool.requires_customer and context.customer and self.inject_customer:
                schema = schema.without("customer")
            descriptors.append(tool.to_descriptor(schema))
        return descriptors

    def validate(self, method: str, raw_params: Any) -> Dict[str, Any]:
        """Validate raw parameters for a method. Raises UnknownMethod or ValidationError."""
        return self.registry.lookup(method).schema.validate(raw_params)

    # -- dispatch ------------------------------------------------------------

    def dispatch(self, method: str, params: Mapping[str, Any], context: Optional[Context] = None) -> Any:
        """
        Dispatch already-validated parameters.

        Raises UnknownMethod, PermissionDenied or MissingRequiredField
        before any Stripe call. Returns the projected result, or the
        string "Failed to <operation>" if the Stripe call failed.
        """
        context = context or Context()
        with CallContext():
            tool = self._resolve(method, context)
            try:
                return self._call(tool, params, context)
            except UpstreamFailure as e:
                return self._errors.handle(e)

    def run(self, method: str, raw_params: Any, context: Optional[Context] = None) -> Any:
        """Validate raw parameters, then dispatch. Raises ValidationError as well."""
        context = context or Context()
        with CallContext():
            tool = self._resolve(method, context)
            params = tool.schema.validate(raw_params)
            try:
                return self._call(tool, params, context)
            except UpstreamFailure as e:
                return self._errors.handle(e)

    def execute(self, method: str, raw_params: Any, context: Optional[Context] = None) -> ExecutionResult:
        """
        Full pipeline that never raises.

        This is the entry point for agent loops: every failure category
        maps to an ExecutionStatus, with the message the agent may see.
        """
        context = context or Context()
        start = time.monotonic()

        with CallContext() as call_id:
            try:
                tool = self._resolve(method, context)
                params = tool.schema.validate(raw_params)
                output = self._call(tool, params, context)
            except ToolkitError as e:
                return ExecutionResult(
                    method=method,
                    status=_STATUS_BY_CATEGORY[e.category],
                    error=self._errors.handle(e),
                    execution_time_ms=(time.monotonic() - start) * 1000,
                    call_id=call_id,
                )

            return ExecutionResult(
                method=method,
                status=ExecutionStatus.SUCCESS,
                output=output,
                execution_time_ms=(time.monotonic() - start) * 1000,
                call_id=call_id,
            )

    # -- internals -----------------------------------------------------------

    def _resolve(self, method: str, context: Context) -> Tool:
        tool = self.registry.lookup(method)
        missing = missing_actions(tool, context.permissions)
        if missing:
            raise PermissionDenied(method, missing)
        return tool

    def _merge_context(self, tool: Tool, params: Mapping[str, Any], context: Context) -> Dict[str, Any]:
        merged = dict(params)
        if not (tool.requires_customer and self.inject_customer):
            return merged

        if context.customer:
            merged["customer"] = context.customer
        elif not merged.get("customer"):
            raise MissingRequiredField("customer", tool.method)
        return merged

    def _call(self, tool: Tool, params: Mapping[str, Any], context: Context) -> Any:
        payload = self._merge_context(tool, params, context)
        options = context.request_options()
        operation = self._operations[tool.method]

        start = time.monotonic()
        output = self._invoke_with_timeout(tool, operation, payload, options)
        elapsed_ms = (time.monotonic() - start) * 1000

        self._logger.info(
            f"Executed {tool.method} in {elapsed_ms:.0f}ms",
            extra={
                "method": tool.method,
                "account": context.account,
                "execution_time_ms": elapsed_ms,
            },
        )
        return output

    def _invoke_with_timeout(
        self,
        tool: Tool,
        operation: OperationFn,
        payload: Dict[str, Any],
        options: Dict[str, Any],
    ) -> Any:
        """Run one Stripe call on a worker thread; any failure becomes UpstreamFailure."""
        operation_name = tool.name.lower()
        pool = concurrent.futures.ThreadPoolExecutor(max_workers=1)
        try:
            # Worker thread logs under the same call_id
            future = pool.submit(
                contextvars.copy_context().run, operation, self.client, payload, options
            )
            return future.result(timeout=self.timeout_seconds)
        except concurrent.futures.TimeoutError as e:
            self._logger.error(f"Timeout executing {tool.method} after {self.timeout_seconds}s")
            raise UpstreamFailure(tool.method, operation_name, e) from e
        except concurrent.futures.CancelledError as e:
            raise UpstreamFailure(tool.method, operation_name, e) from e
        except Exception as e:
            raise UpstreamFailure(tool.method, operation_name, e) from e
        finally:
            # Do not block on a call that outlived its timeout
            pool.shutdown(wait=False)
