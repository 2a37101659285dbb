from flask import current_app, request, jsonify, send_file
from pathlib import Path
from app.main import main_bp
from app.main.hanoi_solver.astar.solver import solve_hanoi
from app.main.hanoi_solver.models import validate_disc_count
from app.main.hanoi_solver.solver_visualizer import SolutionVisualizer

DEFAULT_DISCS = 3


def _read_disc_count():
    """Disc count from JSON body ({"discs": n}) or query string (?discs=n)."""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    discs = data.get('discs', request.args.get('discs', DEFAULT_DISCS))

    if isinstance(discs, str):
        try:
            discs = int(discs)
        except ValueError:
            raise ValueError(f"Number of discs must be an integer, got {discs!r}")

    validate_disc_count(discs)

    max_discs = current_app.config['HANOI_MAX_DISCS']
    if discs > max_discs:
        raise ValueError(f"Number of discs must be <= {max_discs}, got {discs}")

    return discs


@main_bp.route('/solve', methods=['GET', 'POST'])
def solve():
    """Solve the puzzle and return every step of the path."""
    try:
        discs = _read_disc_count()
    except ValueError as e:
        return jsonify({'error': str(e)}), 400

    try:
        solution = solve_hanoi(discs)

        if not solution.is_solved:
            return jsonify({
                'success': False,
                'error': 'No solution found',
                'solution': solution.to_dict()
            }), 422

        return jsonify({
            'success': True,
            'solution': solution.to_dict()
        })

    except Exception as e:
        return jsonify({'error': str(e)}), 500


@main_bp.route('/render', methods=['POST'])
def render():
    """Solve the puzzle and write the solution images to the output folder."""
    try:
        discs = _read_disc_count()
    except ValueError as e:
        return jsonify({'error': str(e)}), 400

    try:
        solution = solve_hanoi(discs)

        if not solution.is_solved:
            return jsonify({
                'success': False,
                'error': 'No solution found'
            }), 422

        visualizer = SolutionVisualizer(output_dir=current_app.config['OUTPUT_FOLDER'])
        images = visualizer.visualize_solution(solution, prefix=f"{discs}discs")

        return jsonify({
            'success': True,
            'solution': solution.to_dict(),
            'images': {
                'solution_visualizations': images
            }
        })

    except Exception as e:
        return jsonify({'error': str(e)}), 500


@main_bp.route('/output/<path:filename>')
def get_output_image(filename):
    """Serve output images."""
    output_folder = Path(current_app.config['OUTPUT_FOLDER']).resolve()
    filepath = (output_folder / filename).resolve()

    if output_folder in filepath.parents and filepath.exists():
        return send_file(str(filepath))

    return jsonify({'error': 'Image not found'}), 404
