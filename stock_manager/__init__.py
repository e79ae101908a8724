"""Stock Manager - portfolio holdings, trades and valuation."""
