# Copyright (C) 2025, RTE (http://www.rte-france.com)
# SPDX-License-Identifier: Apache-2.0

"""
HTTP API to list and sweep the resources left by the fixtures on a test
host
"""

from flask import Flask, abort, jsonify
from flask_wtf.csrf import CSRFProtect

from virt_fixtures.helpers.libvirt import LibVirtSession
from virt_fixtures.reapers import reap_leftovers
from virt_fixtures.resources import SWEEP_ORDER, find_leftovers

app = Flask(__name__)
app.config["LIBVIRT_URI"] = None
csrf = CSRFProtect()
csrf.init_app(app)


def execfunc(func, kinds):
    if any(kind not in SWEEP_ORDER for kind in kinds):
        abort(404)
    try:
        with LibVirtSession(app.config["LIBVIRT_URI"]) as session:
            out = func(session, kinds)
    except Exception as err:
        return f"{err.__class__.__name__}: {err}", 500
    return jsonify(out)


@app.route("/")
def list_all():
    return execfunc(find_leftovers, SWEEP_ORDER)


@app.route("/leftovers/<kind>")
def list_kind(kind):
    return execfunc(find_leftovers, [kind])


@app.route("/sweep")
def sweep_all():
    return execfunc(reap_leftovers, SWEEP_ORDER)


@app.route("/sweep/<kind>")
def sweep_kind(kind):
    return execfunc(reap_leftovers, [kind])


if __name__ == "__main__":
    app.run(host="0.0.0.0")
