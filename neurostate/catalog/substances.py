"""
substances
==========

Dose-calibrated substance definitions.  Each entry declares, per kinetic
field, either a :class:`~neurostate.models.Constant` or a pair of
:class:`~neurostate.models.Anchors` between which the value is interpolated
(and beyond which it is extrapolated).  Which fields vary with dose is a
property of the substance:

``caffeine``
    CYP1A2 saturation stretches the half-life from ~4.5 h at 50 mg to
    ~6.5 h at 400 mg; peak drifts from 40 to 50 min.  Duration is 2.2
    times the rounded half-life.

``l-theanine``
    Half-life stable at ~65 min; noticeable duration grows with dose and
    onset quickens.

``nicotine``
    Elimination half-life, onset and peak are strength independent; only
    duration grows.

``l-tyrosine``
    Peak delays from 75 to 120 min at higher doses.

``flmodafinil``
    Long half-life (12-15 h) rising with dose, peak 3-5 h.

``bromantane``
    Largely dose independent in the 25-100 mg range.

``shilajit``
    Modelled conservatively; peak and duration grow with dose.

Magnitudes in ``receptor_interactions`` are on a 0-100 scale.
"""

from __future__ import annotations

from typing import Tuple

from ..models import (
    Anchors,
    Calibration,
    Constant,
    InteractionType,
    Kinetics,
    ReceptorInteraction,
    Scaled,
    Substance,
    SubstanceCategory,
)

AGONIST = InteractionType.AGONIST
ANTAGONIST = InteractionType.ANTAGONIST
MODULATION = InteractionType.MODULATION
PRECURSOR = InteractionType.PRECURSOR
UPREGULATION = InteractionType.UPREGULATION


SUBSTANCES: Tuple[Substance, ...] = (
    Substance(
        id="caffeine",
        name="Caffeine",
        category=SubstanceCategory.STIMULANT,
        dosage_unit="mg",
        common_doses=(50, 100, 200),
        default_kinetics=Kinetics(half_life=5, onset_time=15, peak_time=45, duration=10, tolerance_rate=5),
        calibration=Calibration(
            half_life=Anchors(50, 4.5, 400, 6.5, precision=1),
            onset_time=Constant(15),
            peak_time=Anchors(50, 40, 400, 50, precision=0),
            duration=Scaled("half_life", 2.2, precision=1),
            tolerance_rate=Constant(5),
        ),
        receptor_interactions=(
            ReceptorInteraction("a1", "adenosine", ANTAGONIST, 80),
            ReceptorInteraction("a2a", "adenosine", ANTAGONIST, 70),
            ReceptorInteraction("d2", "dopamine", MODULATION, 20),
        ),
        description="Adenosine blocker. Most consumed psychoactive worldwide.",
        mechanism="Blocks A1/A2A adenosine receptors; secondary dopamine upregulation via A2A-D2 interaction.",
    ),
    Substance(
        id="l-theanine",
        name="L-Theanine",
        category=SubstanceCategory.NOOTROPIC,
        dosage_unit="mg",
        common_doses=(100, 200, 400),
        default_kinetics=Kinetics(half_life=1.1, onset_time=30, peak_time=50, duration=4, tolerance_rate=1),
        calibration=Calibration(
            half_life=Constant(1.1),
            onset_time=Anchors(100, 35, 400, 25, precision=0),
            peak_time=Constant(50),
            duration=Anchors(100, 3, 400, 7, precision=1),
            tolerance_rate=Constant(1),
        ),
        receptor_interactions=(
            ReceptorInteraction("gabaa", "gaba", AGONIST, 35),
            ReceptorInteraction("5ht1a", "serotonin", MODULATION, 20),
            ReceptorInteraction("d1", "dopamine", MODULATION, 15),
        ),
        description="Green tea amino acid. Calm focus without sedation.",
        mechanism="Increases GABA, serotonin, and dopamine. Promotes alpha brain waves.",
    ),
    Substance(
        id="nicotine",
        name="Nicotine",
        category=SubstanceCategory.STIMULANT,
        dosage_unit="mg",
        common_doses=(1, 2, 4),
        default_kinetics=Kinetics(half_life=2, onset_time=5, peak_time=15, duration=4, tolerance_rate=12),
        calibration=Calibration(
            half_life=Constant(2),
            onset_time=Constant(5),
            peak_time=Constant(15),
            duration=Anchors(1, 3.5, 6, 5, precision=1),
            tolerance_rate=Constant(12),
        ),
        receptor_interactions=(
            ReceptorInteraction("d1", "dopamine", AGONIST, 55),
            ReceptorInteraction("d2", "dopamine", AGONIST, 45),
        ),
        description="nAChR agonist. Rapid attention and focus enhancer.",
        mechanism="Activates nicotinic receptors triggering downstream dopamine and norepinephrine release.",
    ),
    Substance(
        id="l-tyrosine",
        name="L-Tyrosine",
        category=SubstanceCategory.NOOTROPIC,
        dosage_unit="mg",
        common_doses=(250, 500, 1000),
        default_kinetics=Kinetics(half_life=2, onset_time=30, peak_time=90, duration=5, tolerance_rate=2),
        calibration=Calibration(
            half_life=Anchors(250, 1.8, 1000, 2.5, precision=1),
            onset_time=Constant(30),
            peak_time=Anchors(250, 75, 1000, 120, precision=0),
            duration=Anchors(250, 4, 1000, 6, precision=1),
            tolerance_rate=Constant(2),
        ),
        receptor_interactions=(
            ReceptorInteraction("d1", "dopamine", PRECURSOR, 40),
            ReceptorInteraction("d2", "dopamine", PRECURSOR, 35),
        ),
        description="Dopamine precursor amino acid. Best under stress or depletion.",
        mechanism="Raw material for dopamine/NE synthesis via tyrosine hydroxylase.",
    ),
    Substance(
        id="flmodafinil",
        name="Flmodafinil",
        category=SubstanceCategory.STIMULANT,
        dosage_unit="mg",
        common_doses=(25, 50, 100),
        default_kinetics=Kinetics(half_life=13, onset_time=20, peak_time=240, duration=16, tolerance_rate=3),
        calibration=Calibration(
            half_life=Anchors(25, 12, 100, 15, precision=1),
            onset_time=Anchors(25, 15, 100, 25, precision=0),
            peak_time=Anchors(25, 180, 100, 300, precision=0),
            duration=Anchors(25, 14, 100, 18, precision=1),
            tolerance_rate=Constant(3),
        ),
        receptor_interactions=(
            ReceptorInteraction("d1", "dopamine", AGONIST, 50),
            ReceptorInteraction("a2a", "adenosine", ANTAGONIST, 25),
            ReceptorInteraction("5ht1a", "serotonin", MODULATION, 12),
        ),
        description="Fluorinated eugeroic. Higher bioavailability than modafinil.",
        mechanism="Selective dopamine reuptake inhibitor (DAT). Modulates histamine and orexin systems.",
    ),
    Substance(
        id="bromantane",
        name="Bromantane",
        category=SubstanceCategory.NOOTROPIC,
        dosage_unit="mg",
        common_doses=(25, 50, 100),
        default_kinetics=Kinetics(half_life=11, onset_time=90, peak_time=180, duration=24, tolerance_rate=1),
        calibration=Calibration(
            half_life=Constant(11),
            onset_time=Constant(90),
            peak_time=Anchors(25, 165, 100, 210, precision=0),
            duration=Constant(24),
            tolerance_rate=Constant(1),
        ),
        receptor_interactions=(
            ReceptorInteraction("d1", "dopamine", UPREGULATION, 50),
            ReceptorInteraction("d2", "dopamine", UPREGULATION, 45),
        ),
        description="Adamantane derivative. Upregulates dopamine synthesis enzymes.",
        mechanism="Increases TH and AADC gene expression for endogenous dopamine production.",
    ),
    Substance(
        id="shilajit",
        name="Shilajit",
        category=SubstanceCategory.SUPPLEMENT,
        dosage_unit="mg",
        common_doses=(250, 500),
        default_kinetics=Kinetics(half_life=7, onset_time=60, peak_time=180, duration=12, tolerance_rate=2),
        calibration=Calibration(
            half_life=Constant(7),
            onset_time=Constant(60),
            peak_time=Anchors(250, 150, 500, 210, precision=0),
            duration=Anchors(250, 10, 500, 14, precision=1),
            tolerance_rate=Constant(2),
        ),
        receptor_interactions=(
            ReceptorInteraction("d1", "dopamine", MODULATION, 30),
            ReceptorInteraction("d2", "dopamine", MODULATION, 25),
        ),
        description="Himalayan mineral resin rich in fulvic acid and DBPs.",
        mechanism="MAO-B inhibition slows dopamine breakdown. Enhances mitochondrial function.",
    ),
)


__all__ = ["SUBSTANCES"]
