"""
Travel Registration.

Generates the bilingual accommodation/traveller registration PDF from a
filled form record and photographed documents.
"""
