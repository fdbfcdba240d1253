from flask import Blueprint, redirect, render_template, url_for

main_bp = Blueprint('main', __name__)

@main_bp.route('/')
def index():
    # The game is the only project on the site
    return redirect(url_for('tic_tac_toe.index'))

@main_bp.app_errorhandler(404)
def page_not_found(e):
    return render_template('404.html'), 404
