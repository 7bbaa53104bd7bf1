#!/usr/bin/env python3
"""
주차장 점유 시뮬레이션 메인 실행 파일

사용법:
    lotsim --rate 3 --capacity 50
    lotsim --rate 3 --optimize

단일 시뮬레이션을 실행해 결과를 요약하거나, 도착률에 맞는 최소 주차면 수를 찾습니다.
"""
import argparse
import os
from datetime import datetime

from lotsim.config import (
    SEED, SIMULATION_DURATION, DEFAULT_LOT_CAPACITY, DEFAULT_ARRIVAL_RATE,
    NUM_RUNS, QUEUE_THRESHOLD, SNAPSHOT_INTERVAL
)
from lotsim.models.parking_lot import ParkingLot
from lotsim.simulation.capacity_optimizer import CapacityOptimizer
from lotsim.simulation.simulator import Simulator
from lotsim.utils.logger import SimulationLogger
from lotsim.utils.random_generator import RandomGenerator


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='주차장 점유 시뮬레이션')
    parser.add_argument("--rate", type=int, default=DEFAULT_ARRIVAL_RATE,
                        help=f"시간당 도착 차량 수 (기본값: {DEFAULT_ARRIVAL_RATE})")
    parser.add_argument("--capacity", type=int, default=DEFAULT_LOT_CAPACITY,
                        help=f"주차면 수 (기본값: {DEFAULT_LOT_CAPACITY})")
    parser.add_argument("--time", type=int, default=SIMULATION_DURATION,
                        help="시뮬레이션 시간 (초, 기본값: 24시간)")
    parser.add_argument("--seed", type=int, default=SEED, help=f"랜덤 시드 (기본값: {SEED})")
    parser.add_argument("--snapshot-interval", type=int, default=SNAPSHOT_INTERVAL,
                        help=f"점유 현황 기록 간격 (초, 기본값: {SNAPSHOT_INTERVAL})")
    parser.add_argument("--optimize", action="store_true", help="최소 주차면 수 탐색")
    parser.add_argument("--runs", type=int, default=NUM_RUNS,
                        help=f"주차면 수별 반복 횟수 (기본값: {NUM_RUNS})")
    parser.add_argument("--threshold", type=float, default=QUEUE_THRESHOLD,
                        help=f"허용 평균 대기열 길이 (기본값: {QUEUE_THRESHOLD})")
    parser.add_argument("--output-dir", type=str, default=".", help="결과 저장 상위 디렉토리")
    parser.add_argument("--no-save-csv", action="store_true", help="CSV 저장 안 함")
    return parser.parse_args(argv)


def create_output_directory(base_dir: str, prefix: str) -> str:
    """
    결과 파일을 저장할 디렉토리를 생성합니다.

    Args:
        base_dir: 상위 디렉토리
        prefix: 디렉토리 이름 접두사

    Returns:
        생성된 디렉토리 경로
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    output_dir = os.path.join(base_dir, f"results_{prefix}_{timestamp}")
    os.makedirs(output_dir, exist_ok=True)
    print(f"[INFO] 결과 저장 디렉토리 생성: {output_dir}")
    return output_dir


def run_single(args) -> Simulator:
    """설정된 주차장으로 시뮬레이션 1회 실행"""
    print("\n=== 시뮬레이션 설정 ===")
    print(f"  - 시간당 도착 차량: {args.rate}대")
    print(f"  - 주차면: {args.capacity}면")
    print(f"  - 시뮬레이션 시간: {args.time}초")
    print(f"  - 시드: {args.seed}")

    lot = ParkingLot(args.capacity)
    logger = SimulationLogger(capacity=args.capacity, snapshot_interval=args.snapshot_interval)
    sim = Simulator(lot, args.rate, args.time,
                    random_source=RandomGenerator(args.seed),
                    logger=logger)
    print(f"  - 출차 분포 평균 주차 시간: {float(sim.departure_pdf.mean()) / 60:.1f}분")
    sim.simulate()

    print("\n=== 시뮬레이션 결과 ===")
    print(f"입차 대기열: {sim.get_incoming_queue_size()}대")
    print(f"출차 대기열: {sim.get_outgoing_queue_size()}대")
    print(f"주차 중: {lot.get_occupancy()}대\n")
    logger.print_summary()

    if not args.no_save_csv:
        results_dir = create_output_directory(args.output_dir, "sim")
        logger.save_to_csv(os.path.join(results_dir, "simulation_log.csv"))
        logger.save_snapshots_to_csv(os.path.join(results_dir, "simulation_snapshots.csv"))
        logger.save_stats(os.path.join(results_dir, "simulation_stats.json"))
        print(f"\n[INFO] 결과가 {results_dir}에 저장되었습니다.")

    return sim


def run_optimize(args) -> int:
    """도착률에 맞는 최소 주차면 수 탐색"""
    optimizer = CapacityOptimizer(
        hourly_rate=args.rate,
        num_runs=args.runs,
        threshold=args.threshold,
        steps=args.time,
        seed=args.seed
    )
    spots = optimizer.get_optimal_number_of_spots()
    print(f"\nSUMMARY: Optimal lot capacity for hourly arrival rate of {args.rate}: {spots}")

    if not args.no_save_csv:
        results_dir = create_output_directory(args.output_dir, "opt")
        csv_path = os.path.join(results_dir, "capacity_runs.csv")
        optimizer.get_results_dataframe().to_csv(csv_path, index=False)
        print(f"[INFO] 결과가 {csv_path}에 저장되었습니다.")

    return spots


def main(argv=None):
    """
    메인 실행 함수
    """
    args = parse_args(argv)

    if args.optimize:
        run_optimize(args)
    else:
        run_single(args)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
