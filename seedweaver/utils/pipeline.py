"""
SeedWeaver Sampling Pipeline.

Drives one sampling run end to end from a configuration dictionary:
- Graph loading: edge list into an InMemoryGraphExpander
- Sampling: engine selected by strategy (salience, degree, entropy)
- Export: result JSON and discovered-path TSV
- Summary: counts and degree statistics returned to the caller

Handler configuration for the whole package lives here; library modules
only ever create loggers.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

from ..config.parser import ConfigValidationError
from ..config.schema import validate_config
from ..io_utils import export_paths_tsv, export_result_json, load_edge_list
from ..traversal_core import (
    ExpansionEngine,
    ExpansionResult,
    PriorityStrategy,
    create_priority_function,
)
from ..traversal_utils import InMemoryGraphExpander


class SamplingPipeline:
    """
    Configuration-driven sampling run.

    Usage:
        pipeline = SamplingPipeline(load_config("sample.yaml"))
        summary = pipeline.run()
        result = pipeline.result
    """

    def __init__(self, config: Dict[str, Any], configure_logging: bool = True):
        """
        Initialize the pipeline.

        Args:
            config: Configuration dictionary (see config.schema.DEFAULT_CONFIG)
            configure_logging: Install root handlers from output.logging

        Raises:
            ConfigValidationError: If the configuration is invalid
        """
        errors = validate_config(config)
        if errors:
            raise ConfigValidationError("; ".join(errors))

        self.config = config
        self.graph_config = config['graph']
        self.sampling_config = config['sampling']
        self.output_config = config['output']

        if configure_logging:
            self._setup_logging()
        self.logger = logging.getLogger(__name__)

        self.expander: Optional[InMemoryGraphExpander] = None
        self.result: Optional[ExpansionResult] = None

    def _setup_logging(self):
        logging_config = self.output_config.get('logging', {})
        log_level = getattr(logging, str(logging_config.get('level', 'INFO')).upper())

        handlers = [logging.StreamHandler()]
        log_file = logging_config.get('log_file')
        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_file))

        logging.basicConfig(
            level=log_level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=handlers,
        )
        logging.getLogger('seedweaver').setLevel(log_level)

    @property
    def seeds(self) -> List[Any]:
        # Edge-list vertices are strings; YAML may give numeric seeds
        return [str(seed) for seed in self.sampling_config.get('seeds') or []]

    @property
    def strategy(self) -> PriorityStrategy:
        return PriorityStrategy(self.sampling_config.get('strategy', 'salience'))

    def priority_options(self) -> Dict[str, Any]:
        """Keyword arguments for calculate_priority (unset values omitted)."""
        return {
            key: value
            for key, value in self.config.get('priority', {}).items()
            if value is not None
        }

    def load_graph(self) -> InMemoryGraphExpander:
        """Load the configured edge list."""
        graph_path = self.graph_config.get('path')
        if not graph_path:
            raise ConfigValidationError("graph.path is required to run the pipeline")

        self.expander = load_edge_list(
            graph_path,
            delimiter=self.graph_config.get('delimiter'),
            directed=bool(self.graph_config.get('directed', False)),
            default_relationship=self.graph_config.get('default_relationship', 'edge'),
        )

        for seed in self.seeds:
            if self.expander.get_node(seed) is None:
                self.logger.warning(f"Seed {seed!r} is not a vertex of the loaded graph")

        return self.expander

    def build_engine(self, expander) -> ExpansionEngine:
        """Engine for the configured strategy over the given expander."""
        priority = create_priority_function(self.strategy, expander, self.priority_options())
        return ExpansionEngine(expander, self.seeds, priority)

    def run(self) -> Dict[str, Any]:
        """
        Run the complete sampling pipeline.

        Returns:
            Pipeline execution summary
        """
        self.logger.info("="*60)
        self.logger.info("Starting SeedWeaver Sampling")
        self.logger.info("="*60)

        expander = self.load_graph()
        engine = self.build_engine(expander)
        self.logger.info(f"Strategy: {self.strategy.value}, seeds: {', '.join(map(str, self.seeds))}")

        try:
            self.result = engine.run()
        except Exception as e:
            self.logger.error(f"Sampling failed: {e}", exc_info=True)
            raise

        outputs = self._export(self.result)

        self.logger.info("="*60)
        self.logger.info("Sampling Complete!")
        self.logger.info("="*60)

        return {
            "status": "success",
            "strategy": self.result.strategy,
            "seeds": self.seeds,
            "paths_found": len(self.result.paths),
            "sampled_nodes": len(self.result.sampled_nodes),
            "sampled_edges": len(self.result.sampled_edges),
            "iterations": self.result.stats.iterations,
            "phase_transition_iteration": self.result.phase_transition_iteration,
            "degree_distribution": dict(self.result.stats.degree_distribution),
            "degree_summary": dict(self.result.stats.degree_summary),
            "outputs": outputs,
        }

    def _export(self, result: ExpansionResult) -> Dict[str, str]:
        outputs = {}

        json_path = self.output_config.get('path')
        if json_path:
            export_result_json(result, json_path, seeds=self.seeds)
            outputs['json'] = str(json_path)

        tsv_path = self.output_config.get('paths_tsv')
        if tsv_path:
            export_paths_tsv(result, tsv_path, seeds=self.seeds)
            outputs['paths_tsv'] = str(tsv_path)

        return outputs
