"""Factory for creating image preprocessors."""

from __future__ import annotations

import inspect
from typing import Any, Dict, List, Mapping, Optional, Type, Union

from otsu_threshold.pre_processing.base import ImagePreprocessor
from otsu_threshold.pre_processing.binarize import BinarizePreprocessor
from otsu_threshold.pre_processing.grayscale import GrayscalePreprocessor
from otsu_threshold.pre_processing.identity import IdentityPreprocessor
from otsu_threshold.pre_processing.otsu import OtsuPreprocessor
from otsu_threshold.pre_processing.sequential import SequentialPreprocessor


StepConfig = Union[str, Mapping[str, Optional[Dict[str, Any]]]]
PreprocessorConfig = Union[StepConfig, List[StepConfig]]


class PreprocessorFactory:
    """Instantiate image preprocessors based on configuration."""

    _registry: Dict[str, Type[ImagePreprocessor]] = {
        "identity": IdentityPreprocessor,
        "grayscale": GrayscalePreprocessor,
        "binarize": BinarizePreprocessor,
        "otsu": OtsuPreprocessor,
    }

    @classmethod
    def register(cls, name: str, preprocessor_class: Type[ImagePreprocessor]) -> None:
        """Register a new preprocessor under the given name."""
        cls._registry[name.lower()] = preprocessor_class

    @classmethod
    def available(cls) -> List[str]:
        return sorted(cls._registry)

    @classmethod
    def create(
        cls,
        preprocessor_config: Optional[PreprocessorConfig] = None,
        **shared_params: Any,
    ) -> Optional[ImagePreprocessor]:
        """
        Create a preprocessor instance.

        Args:
            preprocessor_config:
                - None: no preprocessor (returns None)
                - str: name of a single preprocessor ("grayscale", "otsu")
                - {name: params}: a single preprocessor with keyword arguments
                - list of the above: a SequentialPreprocessor
                  (["grayscale", {"binarize": {"threshold": 100}}])
            shared_params: Keyword arguments handed to every preprocessor whose
                constructor accepts them (e.g. ``background``, ``luma``).
                Per-step params take precedence.

        Returns:
            ImagePreprocessor or None if preprocessor_config is None

        Raises:
            ValueError: If preprocessor_config has an invalid type or contains
                       unknown preprocessor names
        """
        if preprocessor_config is None:
            return None

        if isinstance(preprocessor_config, list):
            if not preprocessor_config:
                return None

            preprocessors = [cls._create_step(step, shared_params) for step in preprocessor_config]

            if len(preprocessors) == 1:
                return preprocessors[0]

            return SequentialPreprocessor(preprocessors)

        if isinstance(preprocessor_config, (str, Mapping)):
            return cls._create_step(preprocessor_config, shared_params)

        raise ValueError(
            f"Invalid preprocessor config: {preprocessor_config}. "
            f"Expected None, str, mapping, or a list of those"
        )

    @classmethod
    def _create_step(cls, step: StepConfig, shared_params: Dict[str, Any]) -> ImagePreprocessor:
        if isinstance(step, str):
            return cls._create_single(step, {}, shared_params)

        if isinstance(step, Mapping) and len(step) == 1:
            name, params = next(iter(step.items()))
            if params is not None and not isinstance(params, Mapping):
                raise ValueError(f"Parameters for preprocessor '{name}' must be a mapping, got {params!r}")
            return cls._create_single(name, dict(params or {}), shared_params)

        raise ValueError(
            f"Invalid preprocessor step: {step!r}. Expected a name or a single-entry mapping"
        )

    @classmethod
    def _create_single(
        cls,
        preprocessor_name: str,
        params: Dict[str, Any],
        shared_params: Dict[str, Any],
    ) -> ImagePreprocessor:
        """
        Create a single preprocessor from its name.

        Raises:
            ValueError: If the preprocessor name is not in the registry
        """
        preprocessor_class = cls._registry.get(str(preprocessor_name).lower())

        if preprocessor_class is None:
            available = ", ".join(cls.available()) or "<none>"
            raise ValueError(
                f"Unknown preprocessor '{preprocessor_name}'. "
                f"Available preprocessors: {available}"
            )

        accepted = inspect.signature(preprocessor_class.__init__).parameters
        kwargs = {key: value for key, value in shared_params.items() if key in accepted}
        kwargs.update(params)

        try:
            return preprocessor_class(**kwargs)
        except TypeError as exc:
            raise ValueError(f"Invalid parameters for preprocessor '{preprocessor_name}': {exc}") from exc
