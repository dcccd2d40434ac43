import os
import argparse
import logging
import multiprocessing
import pandas as pd
from datetime import datetime
from typing import List, Dict, Tuple
from dataclasses import dataclass, asdict

from rabin_lab.ciphers import NaiveRabin
from rabin_lab.utils.rabin_key_generator import RabinKeyGenerator
from rabin_lab.utils.round_trip_collector import RoundTripCollector

# --- 1. Define Testable Configurations ---
# This is where you can easily add new Rabin implementations to test.
AVAILABLE_CONFIGURATIONS = {
    "naive": {"class": NaiveRabin, "params": {}},
}


# --- 2. Data Structures for the Experiment ---
@dataclass
class ExperimentConfig:
    """Configuration for a single round-trip trial."""
    trial_id: str
    cipher_config_name: str
    key_size: int
    key_seed: int
    sample_seed: int


@dataclass
class TrialResult:
    """Aggregated result of a single trial."""
    trial_id: str
    cipher_config_name: str
    key_size: int
    samples_used: int
    recovery_rate: float
    avg_decryption_time: float
    keygen_time: float
    collection_time: float


# --- 3. Worker Function for Multiprocessing (must be top-level) ---
def _trial_worker(task: Tuple) -> TrialResult:
    """Generates a key and runs round trips for one configuration."""
    config, cipher, num_samples = task

    start = datetime.now()
    key = RabinKeyGenerator.generate_keypair(config.key_size, seed=config.key_seed)
    keygen_time = (datetime.now() - start).total_seconds()

    collector = RoundTripCollector(cipher)
    samples, collection_time = collector.collect_samples(key, num_samples, config.sample_seed)
    return TrialResult(
        trial_id=config.trial_id,
        cipher_config_name=config.cipher_config_name,
        key_size=config.key_size,
        samples_used=len(samples),
        recovery_rate=sum(s.recovered for s in samples) / len(samples),
        avg_decryption_time=sum(s.decryption_time for s in samples) / len(samples),
        keygen_time=keygen_time,
        collection_time=collection_time,
    )


# --- 4. Main Experiment Orchestrator ---
class ExperimentRunner:
    """Orchestrates the entire round-trip campaign."""

    def __init__(self, cipher_configs: Dict[str, Dict], output_root: str = "results"):
        self.ciphers = {name: cfg["class"](**cfg["params"]) for name, cfg in cipher_configs.items()}
        self.campaign_id = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.output_dir = os.path.join(output_root, f"campaign_{self.campaign_id}")
        os.makedirs(self.output_dir, exist_ok=True)

    def run_campaign(self, key_sizes: List[int], num_keys: int, num_samples: int, seed: int):
        print("Starting Rabin Round-Trip Campaign")
        print("=" * 50)
        print(f"Campaign ID: {self.campaign_id}")
        print(f"Results will be saved in: {self.output_dir}")
        print("-" * 50)
        print("Parameters:")
        print(f"  - Cipher Configurations: {list(self.ciphers.keys())}")
        print(f"  - Prime Sizes: {key_sizes} bits")
        print(f"  - Keys per Config: {num_keys}")
        print(f"  - Samples per Key: {num_samples}")
        print(f"  - Initial Random Seed: {seed}")
        print("=" * 50)

        configs = self._generate_configs(key_sizes, num_keys, seed)
        tasks = [(cfg, self.ciphers[cfg.cipher_config_name], num_samples) for cfg in configs]
        with multiprocessing.Pool() as pool:
            results = pool.map(_trial_worker, tasks)

        self._generate_report(results)

        print("\nCampaign finished successfully.")

    def _generate_configs(self, key_sizes: List[int], num_keys: int, initial_seed: int) -> List[ExperimentConfig]:
        configs = []
        seed = initial_seed
        for cipher_name in self.ciphers.keys():
            for key_size in key_sizes:
                for key_id in range(num_keys):
                    configs.append(ExperimentConfig(
                        trial_id=f"{cipher_name}_ks{key_size}_key{key_id:02d}",
                        cipher_config_name=cipher_name,
                        key_size=key_size,
                        key_seed=seed,
                        sample_seed=seed + 1_000_000
                    ))
                    seed += 1
        return configs

    def _generate_report(self, results: List[TrialResult]):
        print("\n   Generating reports...")
        if not results:
            print("    -> No results to report.")
            return

        df = pd.DataFrame([asdict(r) for r in results])

        detailed_filename = os.path.join(self.output_dir, "detailed_results.csv")
        df.to_csv(detailed_filename, index=False)
        print(f"    -> Detailed results saved to {detailed_filename}")

        self._print_summary_report(df)

    def _print_summary_report(self, df: pd.DataFrame):
        """Calculates and prints a summary table of the campaign results."""
        summary = df.groupby(['cipher_config_name', 'key_size']).agg(
            keys=('trial_id', 'nunique'),
            recovery_rate=('recovery_rate', 'mean'),
            avg_decryption_time=('avg_decryption_time', 'mean'),
            avg_keygen_time=('keygen_time', 'mean'),
        )
        summary['recovery_rate'] = summary['recovery_rate'].map('{:.0%}'.format)
        summary['avg_decryption_time'] = summary['avg_decryption_time'].map('{:.2e}s'.format)
        summary['avg_keygen_time'] = summary['avg_keygen_time'].map('{:.2f}s'.format)

        print("\n" + "=" * 80)
        print("CAMPAIGN SUMMARY")
        print("=" * 80)
        print(summary.to_string())
        print("-" * 80)


# --- 5. Script Entry Point and Argument Parsing ---
def main():
    parser = argparse.ArgumentParser(description="Run a Rabin encrypt/decrypt round-trip campaign.")
    parser.add_argument('--configs', nargs='+', default=["naive"],
                        choices=AVAILABLE_CONFIGURATIONS.keys(), help="List of cipher configurations to test.")
    parser.add_argument('--key-sizes', type=int, nargs='+', default=[64, 128, 256],
                        help="List of prime sizes (in bits) to test.")
    parser.add_argument('--num-keys', type=int, default=10, help="Number of keys to generate per config.")
    parser.add_argument('--samples', type=int, default=1000, help="Number of round trips per key.")
    parser.add_argument('--seed', type=int, default=42, help="Initial random seed for reproducibility.")
    parser.add_argument('--output-dir', default="results", help="Directory receiving the campaign folder.")
    parser.add_argument('--log-level', default="WARNING", help="Logging level (DEBUG, INFO, ...).")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s: %(message)s")

    selected_configs = {name: AVAILABLE_CONFIGURATIONS[name] for name in args.configs}
    runner = ExperimentRunner(selected_configs, output_root=args.output_dir)
    runner.run_campaign(
        key_sizes=args.key_sizes,
        num_keys=args.num_keys,
        num_samples=args.samples,
        seed=args.seed
    )


if __name__ == '__main__':
    main()
