import argparse

from somostools.scan.driver import ScanOptions, scan
from somostools.viz.growth import plot_growth

ap = argparse.ArgumentParser(description="Plot log10|a_n| for Somos-s runs.")
ap.add_argument("--s-min", type=int, default=4)
ap.add_argument("--s-max", type=int, default=12)
ap.add_argument("--save", type=str, default=None)
args = ap.parse_args()

runs = list(scan(ScanOptions(s_min=args.s_min, s_max=args.s_max)))
data = plot_growth(runs, save_path=args.save)
for s, pts in data.items():
    if pts:
        print(f"s={s}: last finite n={pts[-1][0]}, log10|a_n|={pts[-1][1]:.1f}")
